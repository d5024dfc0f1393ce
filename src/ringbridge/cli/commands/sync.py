from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ringbridge.cli.common import (
    build_registry,
    load_settings_or_exit,
    resolve_config_path_or_exit,
)
from ringbridge.config import PlatformConfig
from ringbridge.core import (
    DirectoryError,
    DirectoryService,
    ReconcileResult,
    RingPlatform,
    SnapshotDirectory,
)
from ringbridge.models import PlatformAccessory
from ringbridge.storage import ConfigStore, FileAccessoryRegistry
from ringbridge.utils.redaction import Redactor

logger = logging.getLogger(__name__)


async def run_pass(
    config: PlatformConfig,
    directory: DirectoryService,
    registry: FileAccessoryRegistry,
    cached: list[PlatformAccessory],
    store: ConfigStore | None,
) -> ReconcileResult | None:
    await asyncio.to_thread(registry.reset_external)
    platform = RingPlatform(config, directory, registry, config_store=store)
    for accessory in cached:
        platform.configure_accessory(accessory)

    result = await platform.did_finish_launching()
    if platform.rotation_listener is not None:
        # snapshot streams are finite, so drain them before exiting
        await platform.rotation_listener.join()
    return result


def _print_result(console: Console, result: ReconcileResult, redact: bool) -> None:
    redactor = Redactor(enabled=redact)
    table = Table()
    table.add_column("Identity", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Type")
    table.add_column("Variant", style="yellow")
    table.add_column("Placement")
    table.add_column("Status")

    for uuid, binding in result.bound.items():
        table.add_row(
            redactor.redact_uuid(uuid),
            binding.accessory.display_name,
            binding.candidate.device_type,
            binding.variant.value,
            "external" if binding.external else "bridged",
            "new" if binding.created else "reused",
        )

    console.print(table)
    console.print(
        f"\n[green]{len(result.create)} created[/green], "
        f"{len(result.reuse)} reused, "
        f"{len(result.publish_external)} external, "
        f"[yellow]{len(result.stale)} stale[/yellow], "
        f"{len(result.hidden)} hidden"
    )
    if result.unbridge:
        console.print(
            f"[yellow]![/yellow] {len(result.unbridge)} camera(s) moved out of the "
            "bridge and must be paired again"
        )


def sync(
    snapshot: Path = typer.Argument(..., help="Directory snapshot (YAML)"),
    redact: bool = typer.Option(
        False,
        "--redact",
        help="Mask accessory identities in output",
    ),
) -> None:
    """Reconcile directory devices with the accessory registry."""
    console = Console()

    settings = load_settings_or_exit()
    config_path, config_exists = resolve_config_path_or_exit(allow_missing=True)
    registry = build_registry(settings)

    if not settings.platform.refresh_token:
        console.print(
            "[yellow]⚠[/yellow] Not configured: set platform.refresh_token "
            "(see 'ringbridge init --refresh-token')."
        )
        raise typer.Exit(1)

    try:
        directory = SnapshotDirectory.load(snapshot)
        cached = registry.cached_accessories()
    except (DirectoryError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from None

    logger.info("Reconciling %d cached accessories against %s", len(cached), snapshot)
    store = ConfigStore(config_path) if config_exists else None
    result = asyncio.run(
        run_pass(settings.platform, directory, registry, cached, store)
    )

    if result is None:
        console.print("[red]✗[/red] Reconciliation pass aborted")
        raise typer.Exit(1)

    _print_result(console, result, redact)


def register(app: typer.Typer) -> None:
    app.command()(sync)
