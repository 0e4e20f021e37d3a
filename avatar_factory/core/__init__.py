"""Core data layer: models and catalog loading."""

from .catalog import CatalogError, default_catalog, load_catalog, parse_catalog

__all__ = [
    "CatalogError",
    "default_catalog",
    "load_catalog",
    "parse_catalog",
]
