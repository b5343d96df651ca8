# scrubbing/engine/scrub.py

"""Fluent text-scrubbing engine."""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

import regex

from scrubbing.core.domain import MatchEvaluator, PatternPair, WordTable
from scrubbing.core.exceptions import (
    InvalidArgumentError,
    MatchTimeoutError,
    PatternNotFoundError,
)
from scrubbing.core.loader import PatternLoader
from scrubbing.engine.cache import PatternCache
from scrubbing.service.config import settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 1.0

Replacement = Union[str, MatchEvaluator]


class Scrub:
    """Holds a working string and drives it through transformation stages.

    Every transform returns the engine itself, so calls compose in the
    order written::

        Scrub(text).strip("[,]").map_chars().map_words().translate_patterns()

    The three tables (``char_table``, ``word_table``, ``pattern_list``) and
    the ``named_patterns`` library are public and may be edited in place
    after bulk setup.
    """

    def __init__(self, text: str) -> None:
        """Initialize the engine around an initial working string.

        Args:
            text: String to scrub

        Raises:
            InvalidArgumentError: If text is None or not a string.
        """
        self._text = self._require_text(text)

        self.char_table: Dict[str, str] = {}
        self.word_table: WordTable = WordTable()
        self.pattern_list: List[PatternPair] = []
        self.named_patterns: Dict[str, str] = (
            PatternLoader.get_instance().get_patterns()
        )

        self._flags = regex.IGNORECASE if settings.ignore_case else 0
        self._timeout = DEFAULT_TIMEOUT_SECONDS
        self.timeout = settings.timeout_seconds

    @staticmethod
    def _require_text(text: str) -> str:
        if text is None:
            raise InvalidArgumentError("Working string cannot be None")
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Working string must be str, got {type(text).__name__}"
            )
        return text

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    @property
    def timeout(self) -> float:
        """Seconds a single pattern search may run."""
        return self._timeout

    @timeout.setter
    def timeout(self, seconds: float) -> None:
        self._timeout = DEFAULT_TIMEOUT_SECONDS if seconds <= 0 else float(seconds)

    @property
    def cache_size(self) -> int:
        """Capacity of the process-wide compiled pattern cache."""
        return PatternCache.get_instance().capacity

    @cache_size.setter
    def cache_size(self, size: int) -> None:
        PatternCache.get_instance().capacity = size

    @property
    def case_insensitive(self) -> bool:
        return bool(self._flags & regex.IGNORECASE)

    def ignore_case(self, ignore: bool = True) -> "Scrub":
        """Turns case-insensitive matching on or off for pattern operations.

        Character and word tables keep their own comparison rules.
        """
        if ignore:
            self._flags |= regex.IGNORECASE
        else:
            self._flags &= ~regex.IGNORECASE
        return self

    # ------------------------------------------------------------------
    # Table configuration
    # ------------------------------------------------------------------

    def set_char_translator(
        self,
        translate_map: Optional[Union[Mapping[str, str], Sequence[str]]] = None,
        output_map: Optional[Sequence[str]] = None,
    ) -> None:
        """Replaces the character table.

        Accepts either a mapping of character to character, or two
        equal-length sequences paired by position::

            scrub.set_char_translator("éè", "ee")
            scrub.set_char_translator({"é": "e"})

        Passing nothing clears the table.

        Raises:
            InvalidArgumentError: If the sequences differ in length or an
                entry is not a single character.
        """
        if output_map is not None:
            if translate_map is None or isinstance(translate_map, Mapping):
                raise InvalidArgumentError(
                    "Output characters given without matching input characters"
                )
            if len(translate_map) != len(output_map):
                raise InvalidArgumentError(
                    "Invalid length of character sequences, they must be equal length"
                )
            table = dict(zip(translate_map, output_map))
        elif translate_map is None:
            table = {}
        elif isinstance(translate_map, Mapping):
            table = dict(translate_map)
        else:
            raise InvalidArgumentError(
                "A character sequence needs a matching output sequence"
            )

        self._check_char_table(table)
        self.char_table = table

    def set_word_translator(
        self, translate_map: Optional[Mapping[str, str]] = None, ignore_case: bool = False
    ) -> None:
        """Replaces the word table, fixing its key comparison mode."""
        self.word_table = WordTable(translate_map, ignore_case=ignore_case)

    def set_pattern_list(self, pairs: Optional[Iterable[PatternPair]] = None) -> None:
        """Replaces the ordered (pattern, replacement) list with a copy."""
        self.pattern_list = [tuple(pair) for pair in pairs] if pairs else []

    def define_pattern(self, name: str, pattern: str) -> "Scrub":
        """Adds or replaces an entry in this engine's named pattern library."""
        self.named_patterns[name] = pattern
        return self

    @staticmethod
    def _check_char_table(table: Mapping[str, str]) -> None:
        bad = [
            (k, v)
            for k, v in table.items()
            if not (isinstance(k, str) and isinstance(v, str) and len(k) == len(v) == 1)
        ]
        if bad:
            raise InvalidArgumentError(
                f"Character table entries must map one character to one: {bad}"
            )

    # ------------------------------------------------------------------
    # Table transforms
    # ------------------------------------------------------------------

    def map_chars(self) -> "Scrub":
        """Substitutes every character found in the character table.

        Unmapped characters pass through. The length never changes.
        """
        self._check_char_table(self.char_table)

        table = {ord(k): v for k, v in self.char_table.items()}
        self._text = self._text.translate(table)

        logger.debug("Mapped characters", extra={"table_size": len(table)})
        return self

    def map_words(self, separator: str = " ") -> "Scrub":
        """Substitutes whole tokens found in the word table.

        The working string is split on the literal separator, each token
        is looked up exactly once, and the tokens are joined back with the
        same separator. A replaced token is never looked up again in the
        same call.

        Args:
            separator: Literal text between tokens (not a pattern)
        """
        if not self._text or not separator:
            self._text = ""
            return self

        tokens = self._text.split(separator)
        mapped = [self.word_table.get(t, t) if t else "" for t in tokens]
        self._text = separator.join(mapped)

        logger.debug(
            "Mapped words",
            extra={"token_count": len(tokens), "table_size": len(self.word_table)},
        )
        return self

    # ------------------------------------------------------------------
    # Pattern transforms
    # ------------------------------------------------------------------

    def _replace(self, text: str, pattern: str, replacement: Replacement) -> str:
        """Replaces every non-overlapping match under the current options.

        Raises:
            InvalidArgumentError: If the pattern does not compile
                or the replacement template is invalid.
            MatchTimeoutError: If matching runs past the timeout.
        """
        compiled = PatternCache.get_instance().get(pattern, self._flags)

        try:
            return compiled.sub(replacement, text, timeout=self._timeout)
        except TimeoutError as e:
            logger.warning(
                "Pattern match timed out",
                extra={
                    "pattern": pattern,
                    "timeout": self._timeout,
                    "text_length": len(text),
                },
            )
            raise MatchTimeoutError(pattern, self._timeout) from e
        except regex.error as e:
            logger.error(f"Invalid replacement {replacement!r} for {pattern!r}: {e}")
            raise InvalidArgumentError(
                f"Invalid replacement {replacement!r} for {pattern!r}: {e}"
            ) from e

    def strip(self, pattern: str) -> "Scrub":
        """Removes every match of an inline pattern."""
        self._text = self._replace(self._text, pattern, "")
        return self

    def translate_patterns(self, evaluator: Optional[MatchEvaluator] = None) -> "Scrub":
        """Applies the pattern list in order.

        Each entry works on the result of the entry before it, so later
        patterns see text produced by earlier replacements. When an
        evaluator is given it replaces every entry's literal text for this
        call. If any entry fails, the working string is left untouched.
        """
        text = self._text

        for pattern, replacement in self.pattern_list:
            text = self._replace(
                text, pattern, evaluator if evaluator is not None else replacement
            )

        self._text = text

        logger.debug(
            "Translated patterns",
            extra={
                "pattern_count": len(self.pattern_list),
                "evaluator": evaluator is not None,
            },
        )
        return self

    def apply_named(self, name: str, replacement: str = "") -> "Scrub":
        """Replaces matches of a named library pattern.

        Args:
            name: Key in ``named_patterns``
            replacement: Substitution text, removal by default

        Raises:
            PatternNotFoundError: If the name is not in the library.
        """
        pattern = self.named_patterns.get(name)

        if pattern is None:
            logger.warning(
                f"Unknown named pattern: {name}",
                extra={"available": sorted(self.named_patterns)},
            )
            raise PatternNotFoundError(name)

        self._text = self._replace(self._text, pattern, replacement)
        return self

    def apply_custom(self, pattern: str, evaluator: MatchEvaluator) -> "Scrub":
        """Rewrites each match with a caller-supplied function.

        The evaluator is called once per non-overlapping match with the
        match object (``m.group(0)``, ``m.group(1)``, named groups) and
        returns the literal text that replaces it.
        """
        self._text = self._replace(self._text, pattern, evaluator)
        return self

    # ------------------------------------------------------------------
    # Working string
    # ------------------------------------------------------------------

    def set(self, text: str) -> "Scrub":
        """Replaces the working string outright.

        Raises:
            InvalidArgumentError: If text is None or not a string.
        """
        self._text = self._require_text(text)
        return self

    def to_string(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self):
        return (
            f"<Scrub "
            f"length={len(self._text)} "
            f"chars={len(self.char_table)} "
            f"words={len(self.word_table)} "
            f"patterns={len(self.pattern_list)}>"
        )
