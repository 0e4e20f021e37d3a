"""render command: write the avatar for a name."""

from pathlib import Path
from typing import Optional

import typer

from ...builder import AvatarBuilder, IncompatibleAttributeError
from ...config import AvatarConfig
from ...core.catalog import CatalogError
from ...rendering.store import TemplateNotFoundError
from ..app import app
from ..common import configured_resources, fail


@app.command()
def render(
    name: str = typer.Argument(..., help="Name used as the avatar seed."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout."
    ),
    data_uri: Optional[bool] = typer.Option(
        None, "--data-uri/--svg", help="Emit a base64 data URI or raw SVG."
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Reject parts from the other head group."
    ),
) -> None:
    """Render the avatar derived from NAME."""
    config = AvatarConfig.load()
    if data_uri is None:
        data_uri = config.render.data_uri
    if strict is None:
        strict = config.render.strict

    try:
        resources = configured_resources(config)
        builder = AvatarBuilder(name, resources=resources, strict=strict)
        result = builder.build_data_uri() if data_uri else builder.build()
    except (CatalogError, TemplateNotFoundError, IncompatibleAttributeError) as e:
        fail(str(e))

    if output is None:
        typer.echo(result)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    typer.echo(f"Wrote {output}", err=True)
