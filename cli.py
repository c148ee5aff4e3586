"""Lightweight CLI for the PSO Section ID calculator.

Usage:
    psoid calc foobar                  # legacy (v1/v2) calculation
    psoid calc "PSO Lover" bb RAmar    # Blue Burst calculation with class
    psoid guilds                       # list the ten guilds
    psoid guild Oran                   # one guild by name or section id
    psoid best partisans               # guild(s) with the best partisan rate
    psoid log-level DEBUG              # set log level in settings.toml
"""

import argparse
import logging
import re
import sys

from settings_service import SETTINGS_PATH, _load_settings, clear_settings_cache

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def cmd_calc(args: argparse.Namespace) -> int:
    """Calculate and print the section id for a character name."""
    if not args.verbose:
        # Suppress service logs; errors are reported below
        logging.disable(logging.WARNING)

    from domain import CharacterClass, Version
    from services import get_section_id_service
    from ui import format_guild_report

    try:
        service = get_section_id_service()
        version = Version.from_string(args.version) if args.version else None
        char_class = CharacterClass.from_string(args.char_class) if args.char_class else None
        guild = service.calculate(args.name, version, char_class)
    except ValueError as e:
        # SectionIdError and unknown keywords alike
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_guild_report(args.name, guild))
    return 0


def cmd_guild(args: argparse.Namespace) -> int:
    """Print one guild's details, looked up by section id or name."""
    from domain import SectionIdError, get_guild, get_guild_by_name
    from ui import format_guild_details

    try:
        if args.guild.isdigit():
            guild = get_guild(int(args.guild))
        else:
            guild = get_guild_by_name(args.guild)
    except SectionIdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_guild_details(guild))
    return 0


def cmd_guilds(args: argparse.Namespace) -> int:
    """Print every guild with its role and MAG type."""
    from domain import all_guilds
    from ui import format_guild_row

    print(" ID  Guild       Role    MAG")
    for guild in all_guilds():
        print(format_guild_row(guild))
    return 0


def cmd_best(args: argparse.Namespace) -> int:
    """Print the guild(s) with the highest drop rate for a weapon category."""
    from domain import WeaponCategory
    from services import best_guilds_for

    try:
        category = WeaponCategory.from_string(args.category)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    guilds = best_guilds_for(category)
    rate = guilds[0].drop_rates.rate_for(category)
    names = ", ".join(f"{g.name} ({g.section_id})" for g in guilds)
    print(f"{category.display_name} {rate}%: {names}")
    return 0


def cmd_log_level(args: argparse.Namespace) -> int:
    """Get or set the log level in settings.toml."""
    settings = _load_settings()
    current = settings["env"]["log_level"]

    if args.level is None:
        print(current)
        return 0

    level = args.level.upper()
    if level not in VALID_LOG_LEVELS:
        print(f"invalid level: {args.level} (expected one of {', '.join(VALID_LOG_LEVELS)})")
        return 1

    if level == current:
        print(f"already {level}")
        return 0

    content = SETTINGS_PATH.read_text()
    updated = re.sub(
        r'(log_level\s*=\s*)"[^"]*"',
        rf'\1"{level}"',
        content,
    )
    SETTINGS_PATH.write_text(updated)
    clear_settings_cache()
    print(f"{current} → {level}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="psoid", description="PSO Section ID calculator")
    sub = parser.add_subparsers(dest="command")

    calc_parser = sub.add_parser("calc", help="Calculate the section id for a character name")
    calc_parser.add_argument("name", help="Character name (at most 12 characters)")
    calc_parser.add_argument("version", nargs="?", default=None, help="legacy/v1/v2 or modern/bb/blueburst")
    calc_parser.add_argument("char_class", nargs="?", default=None, metavar="class", help="Character class, e.g. RAmar (Blue Burst only)")
    calc_parser.add_argument("-v", "--verbose", action="store_true", help="Show calculation logs")

    sub.add_parser("guilds", help="List the ten guilds")

    guild_parser = sub.add_parser("guild", help="Show one guild by name or section id")
    guild_parser.add_argument("guild", help="Guild name (e.g. Oran) or section id (0-9)")

    best_parser = sub.add_parser("best", help="Show the best guild(s) for a weapon category")
    best_parser.add_argument("category", help="Weapon category, e.g. partisans")

    ll_parser = sub.add_parser("log-level", help="Get or set the log level in settings.toml")
    ll_parser.add_argument("level", nargs="?", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "calc":
        return cmd_calc(args)
    if args.command == "guild":
        return cmd_guild(args)
    if args.command == "guilds":
        return cmd_guilds(args)
    if args.command == "best":
        return cmd_best(args)
    if args.command == "log-level":
        return cmd_log_level(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
