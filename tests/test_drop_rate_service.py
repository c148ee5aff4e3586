"""
Tests for drop-rate comparisons across guilds.
"""
import pandas as pd
import plotly.graph_objects as go
import pytest

from domain import WeaponCategory, get_guild
from services.drop_rate_service import (
    best_guilds_for,
    build_drop_rate_frame,
    create_drop_rate_chart,
)


class TestBuildDropRateFrame:
    def test_all_guilds(self):
        df = build_drop_rate_frame()

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 10
        assert list(df.columns) == ["section_id"] + [c.display_name for c in WeaponCategory]
        assert df.index[0] == "Viridia"
        assert df.loc["Bluefull", "Partisans"] == 13
        assert df.loc["Whitill", "section_id"] == 9

    def test_subset_of_guilds(self):
        df = build_drop_rate_frame([get_guild(7), get_guild(2)])
        assert list(df.index) == ["Oran", "Skyly"]
        assert df.loc["Oran", "Rods"] == 1

    def test_empty_input(self):
        df = build_drop_rate_frame([])
        assert df.empty
        assert "Sabers" in df.columns


class TestBestGuildsFor:
    @pytest.mark.parametrize("category,expected", [
        (WeaponCategory.PARTISANS, ["Bluefull"]),
        (WeaponCategory.DAGGERS, ["Oran"]),
        (WeaponCategory.MACHINEGUNS, ["Purplenum"]),
        (WeaponCategory.SLICERS, ["Whitill"]),
        (WeaponCategory.SHOTGUNS, ["Viridia"]),
    ])
    def test_single_best(self, category, expected):
        assert [g.name for g in best_guilds_for(category)] == expected

    def test_ties_are_all_returned(self):
        # Every guild shares the same saber rate
        assert len(best_guilds_for(WeaponCategory.SABERS)) == 10

    def test_accepts_category_name(self):
        assert [g.name for g in best_guilds_for("wands")] == ["Pinkal"]

    def test_unknown_category_name(self):
        with pytest.raises(ValueError):
            best_guilds_for("lasers")


class TestCreateDropRateChart:
    def test_returns_figure(self):
        fig = create_drop_rate_chart(get_guild(3))

        assert isinstance(fig, go.Figure)
        assert fig.layout.title.text == "Bluefull Drop Rates"
        assert list(fig.data[0].x) == [c.display_name for c in WeaponCategory]
        assert list(fig.data[0].y)[3] == 13
