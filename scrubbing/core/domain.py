# scrubbing/core/domain.py

"""Domain models for translation tables and scrub results."""

from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
)

# (pattern, replacement) entry of the ordered pattern list
PatternPair = Tuple[str, str]

# Receives a match object, returns the literal text to substitute for it
MatchEvaluator = Callable[[Any], str]


class WordTable(MutableMapping[str, str]):
    """Whole-word translation table with a fixed key comparison mode.

    With ``ignore_case`` set, keys are compared after ``str.lower`` so
    ``"Dodge"``, ``"DODGE"`` and ``"dodge"`` address the same entry. Folding
    never expands a character, so ``"straße"`` and ``"strasse"`` stay
    distinct. The spelling used when an entry was last stored is what
    iteration yields.
    The mode cannot change after creation; build a new table instead.
    """

    def __init__(
        self, mapping: Optional[Mapping[str, str]] = None, ignore_case: bool = False
    ) -> None:
        self._ignore_case = ignore_case
        self._entries: Dict[str, Tuple[str, str]] = {}

        if mapping:
            for key, value in mapping.items():
                self[key] = value

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    def _fold(self, key: str) -> str:
        return key.lower() if self._ignore_case else key

    def __getitem__(self, key: str) -> str:
        return self._entries[self._fold(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        self._entries[self._fold(key)] = (key, value)

    def __delitem__(self, key: str) -> None:
        del self._entries[self._fold(key)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return (
            f"<WordTable "
            f"entries={len(self._entries)} "
            f"ignore_case={self._ignore_case}>"
        )


@dataclass
class ScrubResult:
    """Result object returned by the recipe pipeline.

    Attributes:
        original_text: Text the pipeline started from
        scrubbed_text: Working string after every step was applied
        steps: Operation names applied, in order
        metadata: Additional processing information
    """

    original_text: str
    scrubbed_text: str
    steps: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
