"""Typer application for avatar-factory."""

import logging

import typer

from .. import __version__
from ..config import AvatarConfig, ConfigError
from .common import fail


app = typer.Typer(
    name="avatar-factory",
    help="Deterministic SVG avatars from names.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"avatar-factory {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level."),
) -> None:
    """Configure logging from the user configuration."""
    try:
        config = AvatarConfig.load()
    except ConfigError as e:
        fail(str(e))

    level = logging.INFO if verbose else config.log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register commands
from .commands import render, describe, catalog, config  # noqa: E402,F401
