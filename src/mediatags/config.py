"""Configuration management for mediatags.

Handles saving and loading user preferences: which tag readers are
registered and in what order, the default tags to read and the log level.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli_w

logger = logging.getLogger(__name__)

# Names accepted in [readers] tag_readers
TAG_READER_NAMES = ("id3v2", "id3v1")

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.mediatags on all platforms)
    """
    return Path.home() / ".mediatags"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for reader settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "readers": {
            # Registration order is detection priority
            "tag_readers": ["id3v2", "id3v1"],
        },
        "read": {
            # Shortcut names or frame ids; empty means every frame
            "tags": [],
        },
        "logging": {
            "level": "critical",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager."""
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
                # Merge with defaults (in case new keys were added)
                self._merge_config(self.data, loaded_data)
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error(f"Error loading config {self.config_path}: {e}")
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logger.error(f"Error saving config {self.config_path}: {e}")
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Reader settings
    def get_tag_readers(self) -> List[str]:
        """Get the tag reader names in registration order.

        Raises:
            ValueError: If a name is not a known tag reader
        """
        names = list(self.data["readers"]["tag_readers"])
        for name in names:
            if name not in TAG_READER_NAMES:
                raise ValueError(
                    f"Unknown tag reader {name!r}; expected one of {', '.join(TAG_READER_NAMES)}"
                )
        return names

    def set_tag_readers(self, names: List[str]) -> None:
        for name in names:
            if name not in TAG_READER_NAMES:
                raise ValueError(f"Unknown tag reader {name!r}")
        self.data["readers"]["tag_readers"] = list(names)
        self._dirty = True

    # Read settings
    def get_tags_to_read(self) -> Optional[List[str]]:
        """Get the default tags to read, or None to read every frame."""
        tags = self.data["read"]["tags"]
        return list(tags) if tags else None

    def set_tags_to_read(self, tags: Optional[List[str]]) -> None:
        self.data["read"]["tags"] = list(tags) if tags else []
        self._dirty = True

    # Logging settings
    def get_log_level(self) -> str:
        return self.data["logging"]["level"]

    def set_log_level(self, level: str) -> None:
        if level.lower() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")
        self.data["logging"]["level"] = level.lower()
        self._dirty = True
