"""describe command: show the attributes derived from a name."""

import typer

from ...builder import AvatarBuilder
from ...config import AvatarConfig
from ...core.catalog import CatalogError
from ...core.models import ColorValue
from ...rendering.store import TemplateNotFoundError
from ..app import app
from ..common import configured_resources, fail


@app.command()
def describe(
    name: str = typer.Argument(..., help="Name used as the avatar seed."),
    as_json: bool = typer.Option(False, "--json", help="Print the attributes as JSON."),
) -> None:
    """Show which parts and colors NAME selects."""
    try:
        resources = configured_resources(AvatarConfig.load())
    except (CatalogError, TemplateNotFoundError) as e:
        fail(str(e))

    spec = AvatarBuilder(name, resources=resources).spec

    if as_json:
        typer.echo(spec.model_dump_json(indent=2))
        return

    typer.echo(f"Avatar: {spec.name}")
    for field in type(spec).model_fields:
        if field == "name":
            continue
        value = getattr(spec, field)
        if value is None:
            shown = "-"
        elif isinstance(value, ColorValue):
            shown = f"{value.id} ({value.name}, {value.hex})"
        else:
            shown = f"{value.id} ({value.name})"
        typer.echo(f"  {field:<28}{shown}")
