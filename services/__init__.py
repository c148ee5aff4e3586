"""
Services Package

Business logic for the Section ID calculator, layered over the static
domain package.

Each service module follows these principles:
1. Single Responsibility - one concern per module
2. Pure functions at module level, thin service classes on top
3. Dataclasses and enums from domain/ at every boundary

Available Services:
- name_validator: name rules shared by both dialects
- hashing: legacy byte sum and Blue Burst substitution hashes
- SectionIdService: validate -> hash -> guild lookup
- drop_rate_service: cross-guild drop-rate comparisons and charts
"""

# -----------------------------------------------------------------------------
# Validation and hashing
# -----------------------------------------------------------------------------
from services.name_validator import MAX_NAME_LENGTH, validate_name
from services.hashing import (
    CHARACTER_VALUES,
    character_value,
    legacy_section_id,
    modern_section_id,
)

# -----------------------------------------------------------------------------
# Section ID Service
# -----------------------------------------------------------------------------
from services.section_id_service import (
    SectionIdService,
    calculate,
    calculate_section_id,
    get_section_id_service,
)

# -----------------------------------------------------------------------------
# Drop Rate Service
# -----------------------------------------------------------------------------
from services.drop_rate_service import (
    best_guilds_for,
    build_drop_rate_frame,
    create_drop_rate_chart,
)

__all__ = [
    # Validation and hashing
    "MAX_NAME_LENGTH",
    "validate_name",
    "CHARACTER_VALUES",
    "character_value",
    "legacy_section_id",
    "modern_section_id",
    # Section ID Service
    "SectionIdService",
    "calculate",
    "calculate_section_id",
    "get_section_id_service",
    # Drop Rate Service
    "best_guilds_for",
    "build_drop_rate_frame",
    "create_drop_rate_chart",
]
