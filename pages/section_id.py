"""
Section ID Page

Streamlit page for calculating a character's Section ID.
Accepts a character name, the client version and (for Blue Burst) the
character class, and shows the resolved guild with its drop rates.

Includes:
- Guild summary metrics and MAG type badge
- Drop-rate chart for the resolved guild
- Drop-rate comparison table for all ten guilds
"""

import sys
import os

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st

from domain import CharacterClass, SectionIdError, Version
from logging_config import setup_logging
from services import (
    build_drop_rate_frame,
    create_drop_rate_chart,
    get_section_id_service,
)
from ui.column_definitions import get_drop_rate_column_config
from ui.formatters import format_drop, get_mag_type_color

logger = setup_logging(__name__, log_file="section_id_page.log")

service = get_section_id_service()


def highlight_guild(row, guild_name: str):
    """Style function to highlight the resolved guild's row."""
    if row.name == guild_name:
        return ['background-color: #1a3a5e'] * len(row)
    return [''] * len(row)


def main():
    st.title("PSO Section ID Calculator")

    col1, col2, col3 = st.columns([0.4, 0.3, 0.3], vertical_alignment="bottom")
    with col1:
        name = st.text_input("Character name", max_chars=12)
    with col2:
        version = st.radio(
            "Version",
            options=list(Version),
            format_func=lambda v: v.display_name,
            index=list(Version).index(service.default_version),
            horizontal=True,
        )
    with col3:
        char_class = st.selectbox(
            "Class",
            options=[None, *CharacterClass],
            format_func=lambda c: "(none)" if c is None else c.display_name,
            disabled=version is not Version.MODERN,
        )

    if not name:
        st.info("Enter a character name to calculate its Section ID.")
        return

    try:
        guild = service.calculate(name, version, char_class)
    except SectionIdError as e:
        logger.info(f"Rejected {name!r}: {e}")
        st.error(str(e))
        return

    st.subheader(f"{guild.name} (Section ID {guild.section_id})", divider="blue")
    st.badge(f"MAG {guild.mag_type.value}", color=get_mag_type_color(guild.mag_type))

    m1, m2, m3 = st.columns(3)
    with m1:
        st.metric("Preferred Class", guild.role_name)
    with m2:
        st.metric("Common Drop", format_drop(guild.common_drop))
    with m3:
        st.metric("Rare Drop", format_drop(guild.rare_drop))

    st.plotly_chart(create_drop_rate_chart(guild), config={'width': 'content'})

    st.subheader("All Guilds", divider="green")
    df = build_drop_rate_frame()
    st.dataframe(
        df.style.apply(highlight_guild, axis=1, guild_name=guild.name),
        column_config=get_drop_rate_column_config(),
    )


if __name__ == "__main__":
    main()
