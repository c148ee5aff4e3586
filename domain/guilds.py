"""
Guild Registry

The ten static guild records, indexed by section id.

Usage:
    get_guild(3).name               # -> "Bluefull"
    get_guild_by_name("oran")       # -> GuildRecord for section id 7
"""

import logging

from domain.enums import MagType, PreferredRole
from domain.errors import InvalidKeyError
from domain.models import DropRateTable, GuildRecord

logger = logging.getLogger(__name__)

SECTION_ID_COUNT = 10


def _guild(section_id, name, role, common_drop, rare_drop, rates) -> GuildRecord:
    return GuildRecord(
        section_id=section_id,
        name=name,
        preferred_role=role,
        common_drop=common_drop,
        rare_drop=rare_drop,
        mag_type=MagType.for_section_id(section_id),
        drop_rates=DropRateTable(*rates),
    )


# Drop rates in WeaponCategory order:
#   sabers, swords, daggers, partisans, slicers, handguns,
#   rifles, machineguns, shotguns, canes, rods, wands
GUILDS: tuple[GuildRecord, ...] = (
    _guild(0, "Viridia", PreferredRole.RANGER, ("Partisans", 10), ("Slicers", 1),
           (13, 6, 7, 10, 1, 13, 6, 6, 11, 13, 7, 7)),
    _guild(1, "Greennill", PreferredRole.FORCE, ("Rifles", 13), ("Swords", 1),
           (13, 1, 10, 6, 6, 13, 13, 7, 4, 13, 7, 7)),
    _guild(2, "Skyly", PreferredRole.RANGER, ("Swords", 13), ("Machineguns", 1),
           (13, 13, 7, 6, 6, 13, 10, 1, 4, 13, 7, 7)),
    _guild(3, "Bluefull", PreferredRole.HUNTER, ("Partisans", 13), ("Wands", 1),
           (13, 7, 6, 13, 6, 13, 7, 7, 4, 13, 10, 1)),
    _guild(4, "Purplenum", PreferredRole.FORCE, ("Machineguns", 13), ("Daggers", 10),
           (13, 3, 10, 3, 6, 13, 7, 13, 5, 13, 7, 7)),
    _guild(5, "Pinkal", PreferredRole.FORCE, ("Wands", 13), ("Rifles", 1),
           (13, 6, 7, 10, 6, 13, 1, 7, 4, 13, 7, 13)),
    _guild(6, "Redria", PreferredRole.HUNTER, ("Slicers", 10), ("Daggers", 1),
           (13, 7, 1, 7, 10, 13, 7, 7, 8, 13, 7, 7)),
    _guild(7, "Oran", PreferredRole.FORCE, ("Daggers", 13), ("Rods", 1),
           (13, 8, 13, 7, 6, 13, 7, 7, 4, 13, 1, 8)),
    # Yellowboze has no weighted common/rare drop
    _guild(8, "Yellowboze", PreferredRole.RANGER, ("All Equal", 0), ("All Equal", 0),
           (13, 7, 7, 7, 7, 13, 7, 7, 5, 13, 7, 7)),
    _guild(9, "Whitill", PreferredRole.RANGER, ("Machineguns", 10), ("Shotguns", 1),
           (13, 6, 6, 6, 13, 13, 6, 10, 1, 13, 7, 6)),
)

_GUILDS_BY_NAME = {guild.name.lower(): guild for guild in GUILDS}


def all_guilds() -> tuple[GuildRecord, ...]:
    """Return every guild record in section id order."""
    return GUILDS


def get_guild(key: int) -> GuildRecord:
    """
    Look up the guild record for a section id.

    Args:
        key: Section id (0-9)

    Returns:
        The matching GuildRecord

    Raises:
        InvalidKeyError: If key is not an integer in 0-9
    """
    # bool is an int subclass but never a valid key
    if not isinstance(key, int) or isinstance(key, bool) or not 0 <= key < SECTION_ID_COUNT:
        logger.warning(f"Rejected guild lookup for key {key!r}")
        raise InvalidKeyError(key)
    return GUILDS[key]


def get_guild_by_name(name: str) -> GuildRecord:
    """Look up a guild record by name (case-insensitive)."""
    try:
        return _GUILDS_BY_NAME[name.strip().lower()]
    except KeyError:
        raise InvalidKeyError(name) from None
