"""
Section ID Errors

Every failure of the calculator is a deterministic input problem, so each
error is raised once and never retried. All of them derive from
SectionIdError (a ValueError) so callers can catch the whole family.
"""

from typing import Optional


class SectionIdError(ValueError):
    """Base class for all calculator errors."""


class ValidationError(SectionIdError):
    """A character name failed validation."""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class EmptyNameError(ValidationError):
    def __init__(self, name: str = ""):
        super().__init__("Name cannot be empty", name)


class NameTooLongError(ValidationError):
    def __init__(self, name: str, max_length: int):
        super().__init__(
            f"Name must be at most {max_length} characters long (got {len(name)})",
            name,
        )
        self.max_length = max_length


class NonAsciiCharacterError(ValidationError):
    def __init__(self, name: str, character: str):
        super().__init__(
            f"Name must contain only ASCII characters (found {character!r})",
            name,
        )
        self.character = character


class UnsupportedCharacterError(ValidationError):
    def __init__(self, character: str, name: Optional[str] = None):
        super().__init__(
            f"Character {character!r} is not supported by the Blue Burst name table",
            name,
        )
        self.character = character


class MissingClassError(ValidationError):
    def __init__(self, name: Optional[str] = None):
        super().__init__("A character class is required for the modern calculation", name)


class InvalidKeyError(SectionIdError, LookupError):
    """Guild lookup key outside 0-9, or an unknown guild name."""

    def __init__(self, key):
        super().__init__(f"Invalid section ID: {key!r}")
        self.key = key
