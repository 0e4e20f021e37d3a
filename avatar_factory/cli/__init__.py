"""Command-line interface for avatar-factory."""

from .app import app

__all__ = ["app"]
