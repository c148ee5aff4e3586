"""
Name Validator

Checks a character name before it is hashed. Rules are applied in order
and the first violated rule is raised:

1. not empty
2. at most MAX_NAME_LENGTH characters (characters, not bytes)
3. legacy dialect only: every character is ASCII
"""

from domain.enums import Version
from domain.errors import EmptyNameError, NameTooLongError, NonAsciiCharacterError

MAX_NAME_LENGTH = 12


def validate_name(name: str, version: Version = Version.LEGACY) -> str:
    """
    Validate a character name for the given dialect.

    Args:
        name: Character name as typed by the player
        version: Hashing dialect the name will be used with

    Returns:
        The name, unchanged

    Raises:
        TypeError: If name is not a string
        EmptyNameError: If name is empty
        NameTooLongError: If name is longer than MAX_NAME_LENGTH characters
        NonAsciiCharacterError: If a legacy name contains a non-ASCII character
    """
    if not isinstance(name, str):
        raise TypeError(f"Name must be a string, got {type(name).__name__}")
    if not name:
        raise EmptyNameError(name)
    if len(name) > MAX_NAME_LENGTH:
        raise NameTooLongError(name, MAX_NAME_LENGTH)
    if version is Version.LEGACY:
        for ch in name:
            if not ch.isascii():
                raise NonAsciiCharacterError(name, ch)
    return name
