"""Centralized settings loader for the application.

Infrastructure-level module: must not import from services/, domain/,
or logging_config.py to avoid circular imports.
"""

import tomllib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).resolve().parent / "settings.toml"

_cached_settings: dict | None = None


def _load_settings(settings_path: Path | None = None) -> dict:
    """Load and cache settings from the TOML file."""
    global _cached_settings
    if _cached_settings is not None:
        return _cached_settings
    settings_path = settings_path or SETTINGS_PATH
    try:
        with open(settings_path, "rb") as f:
            _cached_settings = tomllib.load(f)
            return _cached_settings
    except Exception as e:
        logger.error("Failed to load settings from %s: %s", settings_path, e)
        raise


def clear_settings_cache() -> None:
    """Drop the cached settings so the next read goes back to disk."""
    global _cached_settings
    _cached_settings = None


class SettingsService:
    """Read-only accessor for application settings.

    Settings are cached at module level after the first read. Once cached,
    a different settings_path is ignored and the cached dict is returned;
    call clear_settings_cache() first to load another file.
    """

    def __init__(self, settings_path: str | Path | None = None):
        self.settings = _load_settings(Path(settings_path) if settings_path else None)

    @property
    def settings_dict(self) -> dict:
        return self.settings

    @property
    def log_level(self) -> str:
        return self.settings["env"]["log_level"]

    @property
    def env(self) -> str:
        return self.settings["env"]["env"]

    @property
    def default_version(self) -> str:
        return self.settings["calculator"]["default_version"]

    @property
    def require_class(self) -> bool:
        return self.settings["calculator"]["require_class"]
