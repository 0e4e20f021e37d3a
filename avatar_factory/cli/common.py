"""Helpers shared by CLI commands."""

import typer

from ..config import AvatarConfig
from ..rendering.resources import AvatarResources, default_resources, load_resources
from ..rendering.store import DirectoryTemplateStore


def configured_resources(config: AvatarConfig) -> AvatarResources:
    """Resources honoring the template directory and catalog overrides."""
    if not config.templates.directory and not config.templates.catalog:
        return default_resources()

    store = None
    if config.templates.directory:
        store = DirectoryTemplateStore(config.templates.directory)
    return load_resources(store=store, catalog_path=config.templates.catalog)


def fail(message: str) -> None:
    """Print an error to stderr and exit with status 1."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)
