"""catalog command: list catalog categories and entries."""

from typing import Optional

import typer

from ...config import AvatarConfig
from ...core.catalog import CatalogError
from ...core.models import COLOR_CATEGORIES, PART_CATEGORIES, ColorValue
from ...rendering.store import TemplateNotFoundError
from ..app import app
from ..common import configured_resources, fail


@app.command()
def catalog(
    category: Optional[str] = typer.Argument(None, help="Category to list, e.g. hair."),
) -> None:
    """List catalog categories, or the entries of one CATEGORY."""
    try:
        entries_source = configured_resources(AvatarConfig.load()).catalog
    except (CatalogError, TemplateNotFoundError) as e:
        fail(str(e))

    if category is None:
        for name in PART_CATEGORIES + COLOR_CATEGORIES:
            typer.echo(f"{name:<14}{len(entries_source.entries(name))} entries")
        return

    try:
        entries = entries_source.entries(category)
    except KeyError:
        fail(
            f"Unknown category '{category}'. Choose from: "
            f"{', '.join(PART_CATEGORIES + COLOR_CATEGORIES)}"
        )

    for entry in entries:
        detail = entry.hex if isinstance(entry, ColorValue) else entry.template
        typer.echo(f"{entry.id:<20}{entry.name:<20}{entry.group.value:<8}{detail}")
