"""
UI Formatting Utilities

Helper functions for consistent text output across the CLI and the
Streamlit page.

Design Principles:
- Pure functions with no side effects
- Use domain models (GuildRecord, DropRateTable) for business logic
- Return simple types (str, list[str]) for flexibility
"""

from domain.enums import MagType
from domain.models import DropRateTable, GuildRecord


def format_summary(guild: GuildRecord) -> str:
    """
    Single-line guild summary.

    Returns:
        "Guild: {name}, Class: {role}, Common: {item} ({pct}%), Rare: {item} ({pct}%), MAG: {type}"
    """
    return guild.summary()


def format_drop(drop: tuple[str, int]) -> str:
    """Format a (category, percentage) pair, e.g. "Partisans (13%)"."""
    item, pct = drop
    return f"{item} ({pct}%)"


def format_drop_rates(table: DropRateTable) -> list[str]:
    """One aligned "  Category    : pct%" line per weapon category."""
    return [f"  {category:<12}: {pct}%" for category, pct in table.as_dict().items()]


def format_guild_details(guild: GuildRecord) -> str:
    """
    Summary, best/worst weapon and the detailed drop-rate listing for a guild.
    """
    best, best_pct = guild.drop_rates.highest
    worst, worst_pct = guild.drop_rates.lowest
    lines = [
        format_summary(guild),
        f"Best Weapon: {best.display_name} ({best_pct}%), "
        f"Worst Weapon: {worst.display_name} ({worst_pct}%)",
        "",
        "Detailed Drop Rates:",
        *format_drop_rates(guild.drop_rates),
    ]
    return "\n".join(lines)


def format_guild_report(name: str, guild: GuildRecord) -> str:
    """
    Full multi-line report for a character.

    Args:
        name: Character name the guild was calculated for
        guild: Resolved guild record

    Returns:
        Character name and section id followed by the guild details
    """
    lines = [
        f"Character Name: {name}",
        f"Section ID: {guild.section_id}",
        "",
        format_guild_details(guild),
    ]
    return "\n".join(lines)


def format_guild_row(guild: GuildRecord) -> str:
    """Compact fixed-width row used by guild listings."""
    return f"{guild.section_id:>2}  {guild.name:<11} {guild.role_name:<7} {guild.mag_type.value}"


def get_mag_type_color(mag_type: MagType) -> str:
    """
    Get Streamlit badge color for a MAG type band.

    Returns:
        Color string for st.badge()
    """
    return {
        MagType.A: "green",
        MagType.B: "blue",
        MagType.C: "orange",
        MagType.D: "violet",
    }[mag_type]
