"""
Domain Models Package

This package contains the core domain models for the Section ID calculator.
These dataclasses and enums are compile-time constants: nothing in the
package is created or mutated at runtime.

Key Components:
- Enums: Version, CharacterClass, PreferredRole, MagType, WeaponCategory
- Models: DropRateTable, GuildRecord
- Guilds: the ten static guild records and their lookups
- Errors: SectionIdError and its subclasses
"""

from domain.enums import (
    CharacterClass,
    MagType,
    PreferredRole,
    Version,
    WeaponCategory,
)
from domain.errors import (
    EmptyNameError,
    InvalidKeyError,
    MissingClassError,
    NameTooLongError,
    NonAsciiCharacterError,
    SectionIdError,
    UnsupportedCharacterError,
    ValidationError,
)
from domain.guilds import (
    GUILDS,
    SECTION_ID_COUNT,
    all_guilds,
    get_guild,
    get_guild_by_name,
)
from domain.models import DropRateTable, GuildRecord

__all__ = [
    # Enums
    "CharacterClass",
    "MagType",
    "PreferredRole",
    "Version",
    "WeaponCategory",
    # Errors
    "SectionIdError",
    "ValidationError",
    "EmptyNameError",
    "NameTooLongError",
    "NonAsciiCharacterError",
    "UnsupportedCharacterError",
    "MissingClassError",
    "InvalidKeyError",
    # Guilds
    "GUILDS",
    "SECTION_ID_COUNT",
    "all_guilds",
    "get_guild",
    "get_guild_by_name",
    # Models
    "DropRateTable",
    "GuildRecord",
]
