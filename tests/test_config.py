"""Tests for settings loading."""

from __future__ import annotations

import pytest

from ringbridge.config import (
    DatabaseConfig,
    PlatformConfig,
    Settings,
    get_settings,
    load_settings,
    render_settings_toml,
    write_settings,
)


def test_config_roundtrip(tmp_path):
    path = tmp_path / "config.toml"
    settings = Settings(
        database=DatabaseConfig(path=str(tmp_path / "data")),
        platform=PlatformConfig(
            refresh_token="token-123",
            hide_device_ids=["uuid-1", "uuid-2"],
            only_device_types=["sensor.contact"],
            unbridge_cameras=True,
            location_mode_polling_seconds=0,
        ),
    )
    write_settings(settings, path)

    loaded = load_settings(path)
    assert loaded == settings


def test_polling_defaults():
    config = PlatformConfig()
    assert config.location_mode_polling_seconds == 20
    assert config.camera_status_polling_seconds == 20


def test_debug_prefix(monkeypatch):
    assert PlatformConfig().debug_prefix == ""
    assert PlatformConfig(debug=True).debug_prefix == "TEST "

    monkeypatch.setenv("RINGBRIDGE_DEBUG", "true")
    assert PlatformConfig().debug is True


def test_token_omitted_when_unset():
    rendered = render_settings_toml(Settings())
    assert "refresh_token" not in rendered
    assert "hide_light_groups = false" in rendered


def test_unknown_option_rejected(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[platform]\nhide_everything = true\n")

    with pytest.raises(ValueError, match="Invalid config file"):
        load_settings(path)


def test_invalid_toml_rejected(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[platform\n")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_settings(path)


def test_env_var_pointing_to_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("RINGBRIDGE_CONFIG", str(tmp_path / "nope.toml"))

    with pytest.raises(FileNotFoundError):
        get_settings()
