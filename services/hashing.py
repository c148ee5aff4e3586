"""
Section ID Hashing

The two name -> digit algorithms.

Legacy (v1/v2):
    sum of the name's ASCII byte values, modulo 10.

Modern (Blue Burst):
    sum of each character's value from CHARACTER_VALUES, plus the
    character class offset when a class is given, modulo 10.

Both functions expect a name that already passed validate_name().
"""

from typing import Optional

from domain.enums import CharacterClass
from domain.errors import UnsupportedCharacterError
from domain.guilds import SECTION_ID_COUNT


def _values(value: int, characters: str) -> dict[str, int]:
    return dict.fromkeys(characters, value)


# Blue Burst name table, grouped by value.
# Columns: uppercase, lowercase, digits, space and punctuation.
CHARACTER_VALUES: dict[str, int] = {
    **_values(0, "FPZ" "dnx" "2" "("),
    **_values(1, "GQ" "eoy" "3" ")=["),
    **_values(2, "HR" "fpz" "4" " *"),
    **_values(3, "IS" "gq" "5" "!+]"),
    **_values(4, "JT" "hr" "6" ",@^"),
    **_values(5, "AKU" "is" "7" "#-_"),
    **_values(6, "BLV" "jt" "8" "$.~"),
    **_values(7, "CMW" "aku" "9" "%"),
    **_values(8, "DNX" "blv" "0" "&"),
    **_values(9, "EOY" "cmw" "1" "'"),
}


def character_value(ch: str) -> int:
    """
    Blue Burst substitution value for a single character.

    Raises:
        UnsupportedCharacterError: If the character has no table entry
    """
    try:
        return CHARACTER_VALUES[ch]
    except KeyError:
        raise UnsupportedCharacterError(ch) from None


def legacy_section_id(name: str) -> int:
    """Section id for the v1/v2 dialect: ASCII byte sum mod 10."""
    return sum(name.encode("ascii")) % SECTION_ID_COUNT


def modern_section_id(name: str, char_class: Optional[CharacterClass] = None) -> int:
    """
    Section id for the Blue Burst dialect.

    Args:
        name: Validated character name
        char_class: Character class; when omitted it contributes nothing

    Returns:
        Section id (0-9)

    Raises:
        UnsupportedCharacterError: If any character has no table entry
    """
    total = 0
    for ch in name:
        try:
            total += character_value(ch)
        except UnsupportedCharacterError as e:
            e.name = name
            raise
    if char_class is not None:
        total += char_class.offset
    return total % SECTION_ID_COUNT
