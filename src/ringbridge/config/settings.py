from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .paths import default_config_path, default_data_dir, expand_path

CONFIG_ENV_VAR = "RINGBRIDGE_CONFIG"
DEBUG_ENV_VAR = "RINGBRIDGE_DEBUG"

DEFAULT_POLLING_SECONDS = 20
TEST_MODE_PREFIX = "TEST "


def _debug_from_env() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() == "true"


class DatabaseConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(default_factory=lambda: str(default_data_dir()))


class PlatformConfig(BaseModel):
    """Options recognized by the Ring platform."""

    model_config = {"frozen": True, "extra": "forbid"}

    refresh_token: str | None = None
    hide_device_ids: list[str] = Field(default_factory=list)
    only_device_types: list[str] = Field(default_factory=list)
    hide_light_groups: bool = False
    show_panic_buttons: bool = False
    unbridge_cameras: bool = False
    location_mode_polling_seconds: int = Field(default=DEFAULT_POLLING_SECONDS, ge=0)
    camera_status_polling_seconds: int = Field(default=DEFAULT_POLLING_SECONDS, ge=0)
    disable_logs: bool = False
    debug: bool = Field(default_factory=_debug_from_env)

    @property
    def debug_prefix(self) -> str:
        """Marker prepended to identities and display names in test mode."""
        return TEST_MODE_PREFIX if self.debug else ""


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    platform: PlatformConfig = Field(default_factory=PlatformConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def data_dir_from_settings(settings: Settings) -> Path:
    return expand_path(settings.database.path)


def _toml_value(value: str | bool | int | list[str]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return json.dumps(value)


def render_settings_toml(settings: Settings) -> str:
    platform = settings.platform
    lines = [
        "# ringbridge configuration",
        "",
        "[database]",
        f"path = {_toml_value(settings.database.path)}",
        "",
        "[platform]",
    ]
    if platform.refresh_token:
        lines.append(f"refresh_token = {_toml_value(platform.refresh_token)}")
    for key in (
        "hide_device_ids",
        "only_device_types",
        "hide_light_groups",
        "show_panic_buttons",
        "unbridge_cameras",
        "location_mode_polling_seconds",
        "camera_status_polling_seconds",
        "disable_logs",
    ):
        lines.append(f"{key} = {_toml_value(getattr(platform, key))}")
    if platform.debug:
        lines.append("debug = true")
    lines.append("")
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
