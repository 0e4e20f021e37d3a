"""config command: show or change CLI settings."""

from typing import Optional

import typer

from ...config import AvatarConfig
from ..app import app
from ..common import fail


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show or set"),
    key: Optional[str] = typer.Argument(None, help="Dotted key, e.g. render.strict"),
    value: Optional[str] = typer.Argument(None, help="New value"),
) -> None:
    """Show or set configuration values."""
    config = AvatarConfig.load()

    if action == "show":
        typer.echo(f"Config file: {config.path()}")
        typer.echo("Templates")
        typer.echo(f"  directory: {config.templates.directory or '(packaged)'}")
        typer.echo(f"  catalog:   {config.templates.catalog or '(packaged)'}")
        typer.echo("Render")
        typer.echo(f"  strict:    {config.render.strict}")
        typer.echo(f"  data_uri:  {config.render.data_uri}")
        typer.echo("Logging")
        typer.echo(f"  level:     {config.logging.level}")
        return

    if action == "set":
        if key is None or value is None:
            fail("Usage: avatar-factory config set KEY VALUE")
        try:
            config.set_value(key, value)
        except ValueError as e:
            fail(str(e))
        path = config.save()
        typer.echo(f"Set {key} = {value} in {path}")
        return

    fail(f"Unknown action '{action}'. Use show or set")
