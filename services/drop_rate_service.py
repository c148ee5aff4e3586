"""
Drop Rate Service

Comparisons across the ten guild drop-rate tables: a DataFrame of every
guild's rates, the best guild(s) for a weapon category, and a bar chart
of a single guild's table.
"""

from typing import Iterable, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from domain.enums import WeaponCategory
from domain.guilds import all_guilds
from domain.models import GuildRecord
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="drop_rates.log")


def build_drop_rate_frame(guilds: Optional[Iterable[GuildRecord]] = None) -> pd.DataFrame:
    """
    Build a DataFrame of drop rates, one row per guild.

    Args:
        guilds: Guilds to include (defaults to all ten, in section id order)

    Returns:
        DataFrame indexed by guild name with a 'section_id' column followed
        by one integer column per weapon category
    """
    guilds = list(all_guilds() if guilds is None else guilds)
    columns = ["section_id"] + [c.display_name for c in WeaponCategory]
    rows = [
        {"guild": g.name, "section_id": g.section_id, **g.drop_rates.as_dict()}
        for g in guilds
    ]
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows).set_index("guild")[columns]


def best_guilds_for(category: WeaponCategory | str) -> list[GuildRecord]:
    """
    Guilds with the highest drop rate for a weapon category.

    Ties are all returned, in section id order.
    """
    if isinstance(category, str):
        category = WeaponCategory.from_string(category)
    guilds = all_guilds()
    best = max(g.drop_rates.rate_for(category) for g in guilds)
    result = [g for g in guilds if g.drop_rates.rate_for(category) == best]
    logger.debug(f"Best for {category.display_name} ({best}%): {[g.name for g in result]}")
    return result


def create_drop_rate_chart(guild: GuildRecord) -> go.Figure:
    """Create a bar chart of a guild's drop rates by weapon category."""
    df = pd.DataFrame(
        list(guild.drop_rates.as_dict().items()),
        columns=["category", "rate"],
    )
    fig = px.bar(
        df,
        x="category",
        y="rate",
        title=f"{guild.name} Drop Rates",
        labels={"category": "Weapon", "rate": "Drop Rate (%)"},
    )
    fig.update_layout(
        xaxis_title="Weapon",
        yaxis_title="Drop Rate (%)",
        xaxis={'tickangle': 45},
        showlegend=False,
    )
    return fig
