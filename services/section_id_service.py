"""
Section ID Service

Main orchestration for the calculator.

Data Flow:
1. Validate the name for the requested dialect
2. Hash it to a section id (legacy byte sum or Blue Burst table)
3. Resolve the section id to its GuildRecord

All failures are deterministic input problems: they are raised as
SectionIdError subclasses and never retried.
"""

import logging
from functools import lru_cache
from typing import Optional

from domain.enums import CharacterClass, Version
from domain.errors import MissingClassError, ValidationError
from domain.guilds import get_guild
from domain.models import GuildRecord
from logging_config import setup_logging
from services.hashing import legacy_section_id, modern_section_id
from services.name_validator import validate_name

logger = setup_logging(__name__, log_file="section_id.log")


# =============================================================================
# Module-level calculation
# =============================================================================

def _resolve_version(version) -> Version:
    """Default a missing version to legacy and parse keywords."""
    if version is None:
        return Version.LEGACY
    if isinstance(version, str):
        return Version.from_string(version)
    if not isinstance(version, Version):
        raise ValueError(f"Invalid version: {version!r}")
    return version


def _resolve_class(char_class) -> Optional[CharacterClass]:
    if char_class is None or isinstance(char_class, CharacterClass):
        return char_class
    if isinstance(char_class, str):
        return CharacterClass.from_string(char_class)
    raise ValueError(f"Invalid class name: {char_class!r}")


def _calculate_section_id(
    name: str,
    version,
    char_class,
    require_class: bool,
    log: logging.Logger,
) -> int:
    version = _resolve_version(version)
    char_class = _resolve_class(char_class)

    try:
        validate_name(name, version)
        if version is Version.MODERN:
            if char_class is None and require_class:
                raise MissingClassError(name)
            section_id = modern_section_id(name, char_class)
        else:
            if char_class is not None:
                log.debug(f"Ignoring class {char_class.display_name} for legacy calculation")
            section_id = legacy_section_id(name)
    except ValidationError as e:
        log.warning(f"Rejected name {name!r} ({version.value}): {e}")
        raise

    log.debug(f"{name!r} ({version.value}) -> section id {section_id}")
    return section_id


def calculate_section_id(
    name: str,
    version: Optional[Version] = None,
    char_class: Optional[CharacterClass] = None,
    *,
    require_class: bool = False,
) -> int:
    """
    Calculate the raw section id (0-9) for a character name.

    Args:
        name: Character name
        version: Hashing dialect; None means legacy
        char_class: Character class, only used by the modern dialect
        require_class: Raise MissingClassError when a modern calculation
            has no class

    Returns:
        Section id (0-9)

    Raises:
        ValidationError: If the name (or missing class) is rejected
        ValueError: If version or char_class is not a known value or keyword
    """
    return _calculate_section_id(name, version, char_class, require_class, logger)


def calculate(
    name: str,
    version: Optional[Version] = None,
    char_class: Optional[CharacterClass] = None,
    *,
    require_class: bool = False,
) -> GuildRecord:
    """
    Resolve a character name to its guild.

    Example:
        >>> calculate("foobar").name
        'Bluefull'
        >>> calculate("PSO Lover", Version.MODERN, CharacterClass.RAMAR).name
        'Skyly'
    """
    section_id = calculate_section_id(name, version, char_class, require_class=require_class)
    return get_guild(section_id)


# =============================================================================
# Service
# =============================================================================

class SectionIdService:
    """
    Calculator configured with a default dialect and class policy.

    Holds no mutable state, so a single instance can be shared freely.
    """

    def __init__(
        self,
        default_version: Version = Version.LEGACY,
        require_class: bool = False,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.default_version = default_version
        self.require_class = require_class
        self._logger = logger_instance or logger

    def calculate_section_id(
        self,
        name: str,
        version: Optional[Version] = None,
        char_class: Optional[CharacterClass] = None,
    ) -> int:
        if version is None:
            version = self.default_version
        return _calculate_section_id(
            name, version, char_class, self.require_class, self._logger
        )

    def calculate(
        self,
        name: str,
        version: Optional[Version] = None,
        char_class: Optional[CharacterClass] = None,
    ) -> GuildRecord:
        """Resolve a name to its guild using this service's defaults."""
        return self.lookup(self.calculate_section_id(name, version, char_class))

    def lookup(self, section_id: int) -> GuildRecord:
        """Resolve a section id to its guild (InvalidKeyError outside 0-9)."""
        return get_guild(section_id)


# =============================================================================
# Factory Function
# =============================================================================

@lru_cache(maxsize=1)
def get_section_id_service() -> SectionIdService:
    """Get the shared SectionIdService configured from settings.toml."""
    from settings_service import SettingsService

    settings = SettingsService()
    logger.setLevel(settings.log_level.upper())
    return SectionIdService(
        default_version=Version.from_string(settings.default_version),
        require_class=settings.require_class,
    )
