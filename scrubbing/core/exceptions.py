# scrubbing/core/exceptions.py

"""Custom exception hierarchy for the scrubbing engine.

Each error also derives from the closest builtin so callers can catch
either the project type or the standard one (``ValueError``,
``KeyError``, ``TimeoutError``).
"""


class ScrubError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(ScrubError):
    """Raised when the pattern library or a recipe fails to load or validate."""

    pass


class InvalidArgumentError(ScrubError, ValueError):
    """Raised when an operation receives an unusable argument.

    Covers mismatched character sequences, a missing working string and
    patterns that do not compile.
    """

    pass


class PatternNotFoundError(ScrubError, KeyError):
    """Raised when a named pattern is not present in the library."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Named pattern '{name}' does not exist")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MatchTimeoutError(ScrubError, TimeoutError):
    """Raised when a pattern search exceeds the configured timeout."""

    def __init__(self, pattern: str, timeout: float):
        self.pattern = pattern
        self.timeout = timeout
        super().__init__(
            f"Pattern '{pattern}' did not finish matching within {timeout}s"
        )
