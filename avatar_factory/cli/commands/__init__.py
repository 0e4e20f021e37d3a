"""CLI commands for avatar-factory."""

from . import (
    render,
    describe,
    catalog,
    config,
)

__all__ = [
    "render",
    "describe",
    "catalog",
    "config",
]
