"""Data models for avatar-factory.

This package contains the Pydantic models used across the system:
- catalog.py: Template groups, colors, parts and the attribute catalog
- avatar.py: The mutable per-avatar attribute state
"""

from .catalog import (
    # Groups
    TemplateGroup,
    # Records
    ColorValue,
    Part,
    # Catalog
    Catalog,
    PART_CATEGORIES,
    COLOR_CATEGORIES,
    GROUPED_CATEGORIES,
)
from .avatar import (
    AvatarSpec,
    GROUPED_FIELDS,
)

__all__ = [
    # Groups
    "TemplateGroup",
    # Records
    "ColorValue",
    "Part",
    # Catalog
    "Catalog",
    "PART_CATEGORIES",
    "COLOR_CATEGORIES",
    "GROUPED_CATEGORIES",
    # Avatar
    "AvatarSpec",
    "GROUPED_FIELDS",
]
