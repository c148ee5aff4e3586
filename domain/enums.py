"""
Domain Enums

Enumerations for the categorical data used by the Section ID calculator.
These replace magic strings and provide type safety.
"""

from enum import Enum, auto


class Version(Enum):
    """
    Name hashing dialect.

    - LEGACY: v1/v2 clients, raw ASCII byte sum
    - MODERN: Blue Burst, per-character substitution table plus class offset
    """
    LEGACY = "legacy"
    MODERN = "modern"

    @classmethod
    def from_string(cls, keyword: str) -> "Version":
        """
        Convert a version keyword to a Version enum.

        Args:
            keyword: Version keyword (case-insensitive).
                     Accepts: "legacy", "v1", "v2", "modern", "bb", "blueburst"

        Returns:
            Corresponding Version enum value

        Raises:
            ValueError: If keyword doesn't match a known version

        Example:
            >>> Version.from_string("v2")
            <Version.LEGACY: 'legacy'>
            >>> Version.from_string("BlueBurst")
            <Version.MODERN: 'modern'>
        """
        mapping = {
            "LEGACY": cls.LEGACY,
            "V1": cls.LEGACY,
            "V2": cls.LEGACY,
            "MODERN": cls.MODERN,
            "BB": cls.MODERN,
            "BLUEBURST": cls.MODERN,
        }
        key = keyword.strip().upper()
        if key not in mapping:
            raise ValueError(
                f"Invalid version: {keyword}. "
                f"Must be one of: {', '.join(k.lower() for k in mapping)}"
            )
        return mapping[key]

    @property
    def display_name(self) -> str:
        return {
            Version.LEGACY: "Legacy (v1/v2)",
            Version.MODERN: "Blue Burst",
        }[self]


class PreferredRole(Enum):
    """Character role a guild favours."""
    HUNTER = auto()
    RANGER = auto()
    FORCE = auto()

    @property
    def display_name(self) -> str:
        """Return human-readable role name."""
        return {
            PreferredRole.HUNTER: "Hunter",
            PreferredRole.RANGER: "Ranger",
            PreferredRole.FORCE: "Force",
        }[self]


class MagType(Enum):
    """
    MAG type associated with a guild.

    Guilds are banded by section id: 0-2 = A, 3-5 = B, 6-8 = C, 9 = D.
    """
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @classmethod
    def for_section_id(cls, section_id: int) -> "MagType":
        """Return the MAG type band for a section id (0-9)."""
        if not 0 <= section_id <= 9:
            raise ValueError(f"Section id out of range: {section_id}")
        if section_id <= 2:
            return cls.A
        elif section_id <= 5:
            return cls.B
        elif section_id <= 8:
            return cls.C
        else:
            return cls.D


class WeaponCategory(Enum):
    """The twelve weapon categories in a guild's drop-rate table, in display order."""
    SABERS = "sabers"
    SWORDS = "swords"
    DAGGERS = "daggers"
    PARTISANS = "partisans"
    SLICERS = "slicers"
    HANDGUNS = "handguns"
    RIFLES = "rifles"
    MACHINEGUNS = "machineguns"
    SHOTGUNS = "shotguns"
    CANES = "canes"
    RODS = "rods"
    WANDS = "wands"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_string(cls, category: str) -> "WeaponCategory":
        """
        Convert a category name to a WeaponCategory (case-insensitive).

        Raises:
            ValueError: If category doesn't match a known weapon category
        """
        try:
            return cls(category.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid weapon category: {category}. "
                f"Must be one of: {', '.join(c.display_name for c in cls)}"
            ) from None


class CharacterClass(Enum):
    """
    Playable character classes.

    Only the modern dialect uses the class: its static offset is added to
    the name's substitution sum before taking the result modulo 10.
    """
    HUMAR = "HUmar"
    HUNEWEARL = "HUnewearl"
    HUCAST = "HUcast"
    RAMAR = "RAmar"
    RACAST = "RAcast"
    RACASEAL = "RAcaseal"
    FOMARL = "FOmarl"
    FONEWM = "FOnewm"
    FONEWEARL = "FOnewearl"
    HUCASEAL = "HUcaseal"
    FOMAR = "FOmar"
    RAMARL = "RAmarl"

    @property
    def offset(self) -> int:
        """Static offset (0-9) added by the modern hash."""
        return {
            CharacterClass.HUMAR: 5,
            CharacterClass.HUNEWEARL: 6,
            CharacterClass.HUCAST: 7,
            CharacterClass.RAMAR: 8,
            CharacterClass.RACAST: 9,
            CharacterClass.RACASEAL: 0,
            CharacterClass.FOMARL: 1,
            CharacterClass.FONEWM: 2,
            CharacterClass.FONEWEARL: 3,
            CharacterClass.HUCASEAL: 4,
            CharacterClass.FOMAR: 5,
            CharacterClass.RAMARL: 6,
        }[self]

    @property
    def role(self) -> PreferredRole:
        """Role family of this class, taken from its two-letter prefix."""
        return {
            "HU": PreferredRole.HUNTER,
            "RA": PreferredRole.RANGER,
            "FO": PreferredRole.FORCE,
        }[self.value[:2]]

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, class_name: str) -> "CharacterClass":
        """
        Convert a class name string to CharacterClass (case-insensitive).

        Raises:
            ValueError: If class_name doesn't match a valid class

        Example:
            >>> CharacterClass.from_string("ramar")
            <CharacterClass.RAMAR: 'RAmar'>
        """
        mapping = {c.value.upper(): c for c in cls}
        key = class_name.strip().upper()
        if key not in mapping:
            raise ValueError(
                f"Invalid class name: {class_name}. "
                f"Must be one of: {', '.join(c.value for c in cls)}"
            )
        return mapping[key]
