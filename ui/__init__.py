"""
UI Package

Presentation layer helpers for the CLI and Streamlit page.
Contains column definitions and formatting utilities.

This package separates display concerns from the calculation,
keeping the CLI and page focused on input handling.
"""

from ui.formatters import (
    format_drop,
    format_drop_rates,
    format_guild_details,
    format_guild_report,
    format_guild_row,
    format_summary,
    get_mag_type_color,
)

__all__ = [
    # Formatters
    "format_drop",
    "format_drop_rates",
    "format_guild_details",
    "format_guild_report",
    "format_guild_row",
    "format_summary",
    "get_mag_type_color",
]
