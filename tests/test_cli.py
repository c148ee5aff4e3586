"""
Tests for the psoid command line interface.
"""
import pytest

import cli


@pytest.fixture
def default_settings(settings_file):
    return settings_file()


class TestCalcCommand:
    def test_legacy_report(self, default_settings, capsys):
        assert cli.main(["calc", "foobar"]) == 0

        out = capsys.readouterr().out
        assert "Character Name: foobar" in out
        assert "Guild: Bluefull, Class: Hunter" in out
        assert "  Wands       : 1%" in out

    def test_modern_with_class(self, default_settings, capsys):
        assert cli.main(["calc", "PSO Lover", "bb", "FOnewearl"]) == 0
        assert "Guild: Oran" in capsys.readouterr().out

    def test_default_version_from_settings(self, settings_file, capsys):
        settings_file(default_version="modern")
        # Only the modern table rejects '/'
        assert cli.main(["calc", "a/b"]) == 1
        assert "not supported" in capsys.readouterr().err

    def test_invalid_name_exits_nonzero(self, default_settings, capsys):
        assert cli.main(["calc", "thisnameistoolong"]) == 1
        assert "Error: Name must be at most 12 characters" in capsys.readouterr().err

    def test_missing_class_when_required(self, settings_file, capsys):
        settings_file(require_class=True)
        assert cli.main(["calc", "PSO Lover", "modern"]) == 1
        assert "class is required" in capsys.readouterr().err

    def test_unknown_version_keyword(self, default_settings, capsys):
        assert cli.main(["calc", "foobar", "gamecube"]) == 1
        assert "Invalid version" in capsys.readouterr().err

    def test_unknown_class_keyword(self, default_settings, capsys):
        assert cli.main(["calc", "foobar", "bb", "Android"]) == 1
        assert "Invalid class name" in capsys.readouterr().err

    def test_bad_default_version_in_settings(self, settings_file, capsys):
        settings_file(default_version="gamecube")
        assert cli.main(["calc", "foobar"]) == 1
        assert capsys.readouterr().err.startswith("Error: Invalid version")

    def test_report_includes_best_and_worst_weapon(self, default_settings, capsys):
        assert cli.main(["calc", "foobar"]) == 0
        assert "Best Weapon: Sabers (13%), Worst Weapon: Wands (1%)" in capsys.readouterr().out


class TestOtherCommands:
    def test_guilds(self, capsys):
        assert cli.main(["guilds"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 11
        assert lines[4] == " 3  Bluefull    Hunter  B"

    def test_guild_by_name(self, capsys):
        assert cli.main(["guild", "oran"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Guild: Oran, Class: Force")
        assert "Worst Weapon: Rods (1%)" in out

    def test_guild_by_section_id(self, capsys):
        assert cli.main(["guild", "9"]) == 0
        assert capsys.readouterr().out.startswith("Guild: Whitill")

    @pytest.mark.parametrize("guild", ["Blackill", "10"])
    def test_guild_unknown(self, guild, capsys):
        assert cli.main(["guild", guild]) == 1
        assert "Invalid section ID" in capsys.readouterr().err

    def test_best(self, capsys):
        assert cli.main(["best", "partisans"]) == 0
        assert capsys.readouterr().out.strip() == "Partisans 13%: Bluefull (3)"

    def test_best_unknown_category(self, capsys):
        assert cli.main(["best", "lasers"]) == 1

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 0
        assert "usage: psoid" in capsys.readouterr().out


class TestLogLevelCommand:
    def test_get(self, settings_file, capsys):
        settings_file(log_level="WARNING")
        assert cli.main(["log-level"]) == 0
        assert capsys.readouterr().out.strip() == "WARNING"

    def test_set(self, settings_file, capsys):
        path = settings_file(log_level="INFO")

        assert cli.main(["log-level", "debug"]) == 0

        assert 'log_level = "DEBUG"' in path.read_text()
        assert cli.main(["log-level"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "DEBUG"

    def test_already_set(self, settings_file, capsys):
        settings_file(log_level="INFO")
        assert cli.main(["log-level", "INFO"]) == 0
        assert "already INFO" in capsys.readouterr().out

    def test_invalid_level(self, settings_file, capsys):
        settings_file()
        assert cli.main(["log-level", "LOUD"]) == 1
