"""Tests for scrubbing.core.loader — the built-in pattern library."""

import regex

from scrubbing.core.definitions import PatternName
from scrubbing.core.loader import PatternLoader


class TestPatternLoader:
    def test_singleton(self):
        assert PatternLoader.get_instance() is PatternLoader()

    def test_every_builtin_present(self):
        patterns = PatternLoader.get_instance().get_patterns()
        assert set(PatternName.ALL) <= set(patterns)

    def test_builtins_compile(self):
        for pattern in PatternLoader.get_instance().get_patterns().values():
            regex.compile(pattern)

    def test_returns_copies(self):
        loader = PatternLoader.get_instance()
        loader.get_patterns()["Extra"] = "x"
        assert "Extra" not in loader.get_patterns()

    def test_backslashes_kept_literal(self):
        loader = PatternLoader.get_instance()
        assert loader.get_pattern(PatternName.WHITESPACE_COMPACT) == r"\s+"
        assert loader.get_pattern(PatternName.WHITESPACE_ENDS) == r"^\s*|\s*$"

    def test_quote_in_email_pattern(self):
        assert "'" in PatternLoader.get_instance().get_pattern(PatternName.EMAIL)

    def test_unknown_name(self):
        assert PatternLoader.get_instance().get_pattern("Nope") is None
