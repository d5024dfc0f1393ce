from __future__ import annotations

import typer
from rich.console import Console

from ringbridge.cli.common import (
    build_registry,
    load_settings_or_exit,
    resolve_config_path_or_exit,
)


def register(app: typer.Typer) -> None:
    @app.command()
    def info() -> None:
        """Show ringbridge paths, options and registry stats."""
        settings = load_settings_or_exit()
        registry = build_registry(settings)
        state = registry.load()
        platform = settings.platform

        config_path, config_exists = resolve_config_path_or_exit(allow_missing=True)

        console = Console()

        console.print("[bold]ringbridge Info[/bold]\n")
        console.print(f"Data directory: {registry.path}")
        console.print(f"Accessory cache: {registry.accessories_path}")
        console.print(f"Config file: {config_path if config_exists else 'defaults'}")

        console.print("\n[bold]Platform[/bold]")
        console.print(f"Configured: {'yes' if platform.refresh_token else 'no'}")
        console.print(f"Unbridge cameras: {platform.unbridge_cameras}")
        console.print(f"Panic buttons: {platform.show_panic_buttons}")
        console.print(f"Hide light groups: {platform.hide_light_groups}")
        console.print(
            f"Location mode polling: {platform.location_mode_polling_seconds}s"
        )
        console.print(
            f"Camera status polling: {platform.camera_status_polling_seconds}s"
        )
        if platform.only_device_types:
            console.print(f"Only device types: {', '.join(platform.only_device_types)}")
        console.print(f"Hidden device ids: {len(platform.hide_device_ids)}")
        if platform.debug:
            console.print("[yellow]Test mode identities enabled[/yellow]")

        console.print("\n[bold]Statistics[/bold]")
        console.print(f"Bridged accessories: {len(state.accessories)}")
        console.print(f"External accessories: {len(state.external)}")
