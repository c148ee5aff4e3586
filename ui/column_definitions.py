"""
Column Definitions for Streamlit DataFrames

Centralized Streamlit column_config definitions for the drop-rate tables.

Usage:
    from ui.column_definitions import get_drop_rate_column_config

    st.dataframe(
        drop_rate_df,
        column_config=get_drop_rate_column_config(),
    )
"""

import streamlit as st

from domain.enums import WeaponCategory


def get_drop_rate_column_config() -> dict:
    """
    Get column configuration for a drop-rate DataFrame.

    Matches the columns produced by build_drop_rate_frame().

    Returns:
        Dict of column name -> st.column_config configuration
    """
    config = {
        'section_id': st.column_config.NumberColumn(
            "ID",
            help="Section ID (0-9)",
            width="small",
        ),
    }
    for category in WeaponCategory:
        config[category.display_name] = st.column_config.NumberColumn(
            category.display_name,
            help=f"Chance of a {category.display_name.lower()} drop",
            format="%d%%",
            width="small",
        )
    return config
