from __future__ import annotations

from typing import Annotated

import typer

from ringbridge.utils.logging import setup_logging

from .commands import config as config_cmd
from .commands.accessories import register as register_accessories
from .commands.info import register as register_info
from .commands.init import register as register_init
from .commands.sync import register as register_sync

app = typer.Typer(
    help="ringbridge - expose Ring devices as bridge accessories", no_args_is_help=True
)

app.add_typer(config_cmd.app, name="config")

register_init(app)
register_sync(app)
register_accessories(app)
register_info(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
) -> None:
    """ringbridge CLI."""
    setup_logging()

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"ringbridge version {get_version('ringbridge')}")
        raise typer.Exit()
