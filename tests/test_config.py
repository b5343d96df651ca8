"""Tests for scrubbing.service.config."""

import pytest
from pydantic import ValidationError

from scrubbing.service.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("SCRUB_TIMEOUT_SECONDS", "SCRUB_CACHE_SIZE", "SCRUB_IGNORE_CASE"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.timeout_seconds == 1.0
        assert s.cache_size == 16
        assert s.ignore_case is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SCRUB_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("SCRUB_IGNORE_CASE", "true")
        s = Settings(_env_file=None)
        assert s.timeout_seconds == 2.5
        assert s.ignore_case is True

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, timeout_seconds=0)

    def test_negative_cache_size_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cache_size=-1)
