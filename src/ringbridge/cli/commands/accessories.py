from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from ringbridge.cli.common import build_registry, load_settings_or_exit
from ringbridge.utils.redaction import Redactor


def list_accessories(
    redact: bool = typer.Option(False, "--redact", help="Mask accessory identities"),
) -> None:
    """List accessories held in the registry."""
    settings = load_settings_or_exit()
    registry = build_registry(settings)
    try:
        state = registry.load()
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    console = Console()

    if not state.accessories and not state.external:
        console.print("No accessories registered.")
        console.print("Run 'ringbridge sync' to reconcile devices.")
        return

    redactor = Redactor(enabled=redact)
    table = Table()
    table.add_column("Identity", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Category")
    table.add_column("Placement", style="yellow")

    for placement, accessories in (
        ("bridged", state.accessories),
        ("external", state.external),
    ):
        for accessory in sorted(accessories, key=lambda a: a.display_name):
            table.add_row(
                redactor.redact_uuid(accessory.uuid),
                accessory.display_name,
                accessory.category.name.lower(),
                placement,
            )

    console.print(table)


def register(app: typer.Typer) -> None:
    app.command("accessories")(list_accessories)
