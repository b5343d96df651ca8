# scrubbing/engine/cache.py

"""Process-wide cache of compiled patterns."""

import logging
import threading
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

import regex

from scrubbing.core.exceptions import InvalidArgumentError
from scrubbing.service.config import settings

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 16


class PatternCache:
    """Bounded LRU storage for compiled patterns.

    Keyed by pattern text and flags, so engines with different case
    settings never share a compiled object. Shared by every engine in the
    process; population and eviction are serialized by a lock.
    """

    _instance: Optional["PatternCache"] = None
    _instance_lock = threading.Lock()

    def __init__(self, capacity: int = DEFAULT_CACHE_SIZE):
        """Initialize empty cache. Use get_instance() for the shared one."""
        self._compiled: "OrderedDict[Tuple[str, int], Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._capacity = DEFAULT_CACHE_SIZE
        self.capacity = capacity

        self.hits = 0
        self.misses = 0

    @classmethod
    def get_instance(cls) -> "PatternCache":
        """Returns the cache shared by all engines in this process."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(settings.cache_size)

        return cls._instance

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        # Negative sizes fall back to the default; zero disables retention
        with self._lock:
            self._capacity = DEFAULT_CACHE_SIZE if value < 0 else value
            self._evict()

    def get(self, pattern: str, flags: int = 0) -> Any:
        """Returns the compiled form of a pattern, compiling on a miss.

        Raises:
            InvalidArgumentError: If the pattern does not compile.
        """
        key = (pattern, flags)

        with self._lock:
            compiled = self._compiled.get(key)
            if compiled is not None:
                self._compiled.move_to_end(key)
                self.hits += 1
                return compiled

        try:
            compiled = regex.compile(pattern, flags)
        except regex.error as e:
            logger.error(f"Failed to compile pattern {pattern!r}: {e}")
            raise InvalidArgumentError(f"Invalid pattern {pattern!r}: {e}") from e

        with self._lock:
            self.misses += 1
            if self._capacity > 0:
                self._compiled[key] = compiled
                self._compiled.move_to_end(key)
                self._evict()

        return compiled

    def _evict(self) -> None:
        while len(self._compiled) > self._capacity:
            evicted, _ = self._compiled.popitem(last=False)
            logger.debug("Evicted compiled pattern", extra={"pattern": evicted[0]})

    def __contains__(self, key: Tuple[str, int]) -> bool:
        return key in self._compiled

    def __len__(self) -> int:
        return len(self._compiled)

    def get_summary(self) -> Dict[str, Any]:
        """Returns cache state summary for logging and debugging."""
        return {
            "size": len(self._compiled),
            "capacity": self._capacity,
            "hits": self.hits,
            "misses": self.misses,
        }

    def reset(self) -> None:
        """Drops every compiled pattern and the hit counters."""
        with self._lock:
            self._compiled.clear()
            self.hits = 0
            self.misses = 0
        logger.debug("PatternCache reset")

    def __repr__(self):
        return (
            f"<PatternCache "
            f"size={len(self._compiled)} "
            f"capacity={self._capacity}>"
        )
