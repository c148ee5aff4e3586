"""
Domain Models

Dataclasses representing the guild records a Section ID resolves to.

Design Principles:
1. Immutability (frozen=True) - Safe to share between threads and hashable
2. Computed properties - Display logic encapsulated in the model
3. Type safety - Explicit types instead of positional tuples
"""

from dataclasses import dataclass

from domain.enums import MagType, PreferredRole, WeaponCategory


# Type aliases for clarity
SectionID = int
Percent = int
Drop = tuple[str, Percent]


# =============================================================================
# DropRateTable - Weapon drop percentages for one guild
# =============================================================================

@dataclass(frozen=True)
class DropRateTable:
    """
    Percentage chance of each weapon category dropping for a guild.

    Field order matches WeaponCategory; field names match the enum values.
    """
    sabers: Percent
    swords: Percent
    daggers: Percent
    partisans: Percent
    slicers: Percent
    handguns: Percent
    rifles: Percent
    machineguns: Percent
    shotguns: Percent
    canes: Percent
    rods: Percent
    wands: Percent

    def rate_for(self, category: WeaponCategory) -> Percent:
        """Drop percentage for a single weapon category."""
        return getattr(self, category.value)

    def as_dict(self) -> dict[str, Percent]:
        """Category display name -> percentage, in display order."""
        return {c.display_name: self.rate_for(c) for c in WeaponCategory}

    def items(self) -> list[tuple[WeaponCategory, Percent]]:
        return [(c, self.rate_for(c)) for c in WeaponCategory]

    @property
    def highest(self) -> tuple[WeaponCategory, Percent]:
        """Category with the highest rate (first in display order on ties)."""
        return max(self.items(), key=lambda item: item[1])

    @property
    def lowest(self) -> tuple[WeaponCategory, Percent]:
        """Category with the lowest rate (first in display order on ties)."""
        return min(self.items(), key=lambda item: item[1])


# =============================================================================
# GuildRecord - Static data for a section id
# =============================================================================

@dataclass(frozen=True)
class GuildRecord:
    """
    The guild a character belongs to.

    Attributes:
        section_id: Numeric section id (0-9)
        name: Guild name (e.g., "Bluefull")
        preferred_role: Role that benefits most from this guild's drops
        common_drop: (weapon category, percentage) most likely to drop
        rare_drop: (weapon category, percentage) least likely to drop
        mag_type: MAG type band
        drop_rates: Full twelve-category drop table
    """
    section_id: SectionID
    name: str
    preferred_role: PreferredRole
    common_drop: Drop
    rare_drop: Drop
    mag_type: MagType
    drop_rates: DropRateTable

    @property
    def role_name(self) -> str:
        return self.preferred_role.display_name

    def summary(self) -> str:
        """Single-line human-readable summary of this guild."""
        common_item, common_pct = self.common_drop
        rare_item, rare_pct = self.rare_drop
        return (
            f"Guild: {self.name}, Class: {self.role_name}, "
            f"Common: {common_item} ({common_pct}%), "
            f"Rare: {rare_item} ({rare_pct}%), "
            f"MAG: {self.mag_type.value}"
        )

    def __str__(self) -> str:
        return self.summary()
