from __future__ import annotations

import typer

from ringbridge.cli.common import load_settings_or_exit, resolve_config_path_or_exit
from ringbridge.config import Settings, render_settings_toml
from ringbridge.utils.redaction import Redactor

app = typer.Typer(no_args_is_help=True)


def redacted_settings(settings: Settings, redactor: Redactor) -> Settings:
    token = settings.platform.refresh_token
    if not token:
        return settings
    platform = settings.platform.model_copy(
        update={"refresh_token": redactor.redact_token(token)}
    )
    return settings.model_copy(update={"platform": platform})


@app.command("show")
def show_config(
    redact: bool = typer.Option(
        True, "--redact/--no-redact", help="Mask the refresh token"
    ),
) -> None:
    """Show current configuration."""
    settings = load_settings_or_exit()
    path, exists = resolve_config_path_or_exit(allow_missing=True)

    source = str(path) if exists else "defaults"
    typer.echo(f"Config source: {source}")
    typer.echo(render_settings_toml(redacted_settings(settings, Redactor(redact))))
