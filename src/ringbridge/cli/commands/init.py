from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from ringbridge.cli.common import build_registry
from ringbridge.config import (
    DatabaseConfig,
    PlatformConfig,
    Settings,
    resolve_config_path,
    write_settings,
)


def register(app: typer.Typer) -> None:
    @app.command()
    def init(
        data_dir: Annotated[
            Path | None,
            typer.Option("--data-dir", "--path", help="Custom data directory"),
        ] = None,
        refresh_token: Annotated[
            str | None,
            typer.Option("--refresh-token", help="Ring refresh token"),
        ] = None,
        force: Annotated[
            bool,
            typer.Option("--force", "-f", help="Overwrite existing config and data"),
        ] = False,
    ) -> None:
        """Initialize ringbridge configuration and data directory."""
        console = Console()

        settings = Settings(
            database=(
                DatabaseConfig(path=str(data_dir)) if data_dir else DatabaseConfig()
            ),
            platform=PlatformConfig(refresh_token=refresh_token),
        )

        config_path, config_exists = resolve_config_path(allow_missing=True)
        if config_exists and not force:
            console.print(f"[dim]Config exists:[/dim] {config_path}")
        else:
            write_settings(settings, config_path)
            action = "Overwrote" if config_exists else "Created"
            console.print(f"[green]✓[/green] {action} config: {config_path}")

        registry = build_registry(settings, data_dir=data_dir)
        created = registry.init(force=force)

        if created:
            console.print(f"[green]✓[/green] Initialized data dir: {registry.path}")
        else:
            console.print(f"[dim]Data dir exists:[/dim] {registry.path}")
