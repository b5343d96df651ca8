# scrubbing/__init__.py

"""Chainable text-scrubbing engine.

Exposes the ``Scrub`` engine and the error types callers are expected
to handle.
"""

from scrubbing.engine.scrub import Scrub
from scrubbing.core.exceptions import (
    ScrubError,
    ConfigurationError,
    InvalidArgumentError,
    PatternNotFoundError,
    MatchTimeoutError,
)

__all__ = [
    "Scrub",
    "ScrubError",
    "ConfigurationError",
    "InvalidArgumentError",
    "PatternNotFoundError",
    "MatchTimeoutError",
]
