# scrubbing/core/loader.py

"""Loader for the built-in named pattern library."""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from scrubbing.core.definitions import PatternName
from scrubbing.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class PatternLoader:
    """Singleton loader for the built-in named patterns.

    Reads patterns.yaml once and caches it for the process lifetime.
    Callers receive copies, so an engine adding its own entries never
    changes what the next engine starts with.
    """

    _instance: Optional["PatternLoader"] = None
    _patterns: Dict[str, str] = {}
    _loaded: bool = False

    def __new__(cls) -> "PatternLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not PatternLoader._loaded:
            self._load_config()

    def _load_config(self) -> None:
        """Loads patterns.yaml from the module directory.

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        try:
            config_path = Path(__file__).parent / "patterns.yaml"

            if not config_path.exists():
                error_msg = f"Pattern library not found: {config_path}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)

            if not config:
                raise ConfigurationError("Pattern library is empty or invalid")

            PatternLoader._patterns = self._validate_config(config)
            PatternLoader._loaded = True

            logger.info(
                "Pattern library loaded successfully",
                extra={
                    "config_path": str(config_path),
                    "pattern_count": len(PatternLoader._patterns),
                },
            )

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse patterns.yaml: {e}") from e
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Pattern library loading failed: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to load pattern library: {e}") from e

    @staticmethod
    def _validate_config(config: Dict[str, Any]) -> Dict[str, str]:
        """Checks every built-in name is present and maps to a string.

        Raises:
            ConfigurationError: If entries are missing or malformed.
        """
        patterns = config.get("patterns")

        if not isinstance(patterns, dict):
            raise ConfigurationError("Missing required 'patterns' section")

        missing = [name for name in PatternName.ALL if name not in patterns]
        if missing:
            error_msg = f"Missing built-in patterns: {missing}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        malformed = [name for name, p in patterns.items() if not isinstance(p, str)]
        if malformed:
            raise ConfigurationError(f"Patterns must be strings: {malformed}")

        return dict(patterns)

    @classmethod
    def get_instance(cls) -> "PatternLoader":
        """Returns the singleton instance of PatternLoader."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_patterns(self) -> Dict[str, str]:
        """Returns a fresh copy of the built-in name to pattern mapping."""
        return dict(self._patterns)

    def get_pattern(self, name: str) -> Optional[str]:
        """Returns a single built-in pattern, or None if the name is unknown."""
        return self._patterns.get(name)
