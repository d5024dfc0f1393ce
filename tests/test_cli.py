"""Tests for the command line interface."""

from __future__ import annotations

import pytest
import yaml
from typer.testing import CliRunner

from ringbridge import __version__
from ringbridge.cli.app import app
from ringbridge.config import (
    DatabaseConfig,
    PlatformConfig,
    Settings,
    get_settings,
    write_settings,
)
from ringbridge.storage import FileAccessoryRegistry

runner = CliRunner()

SNAPSHOT = {
    "locations": [
        {
            "id": "loc-1",
            "name": "Home",
            "supports_mode_switching": True,
            "devices": [
                {"id": "panel-1", "name": "Alarm", "device_type": "security-panel"},
                {
                    "id": "sensor-1",
                    "name": "Front Door",
                    "device_type": "sensor.contact",
                },
                {"id": "adapter-1", "name": "Z-Wave", "device_type": "adapter.zwave"},
            ],
            "cameras": [
                {"id": 12345, "name": "Doorbell", "device_type": "doorbell_v3"},
            ],
        }
    ],
    "refresh_token_updates": [
        {"old_token": "token-aaaa-1111", "new_token": "token-bbbb-2222"},
    ],
}


@pytest.fixture
def configured(tmp_path, monkeypatch):
    data_dir = tmp_path / "data"
    config_path = tmp_path / "config.toml"
    write_settings(
        Settings(
            database=DatabaseConfig(path=str(data_dir)),
            platform=PlatformConfig(refresh_token="token-aaaa-1111"),
        ),
        config_path,
    )
    snapshot_path = tmp_path / "home.yaml"
    snapshot_path.write_text(yaml.safe_dump(SNAPSHOT))

    monkeypatch.setenv("RINGBRIDGE_CONFIG", str(config_path))
    monkeypatch.setenv("COLUMNS", "200")
    get_settings.cache_clear()
    return config_path, data_dir, snapshot_path


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"ringbridge version {__version__}" in result.stdout


def test_init_writes_config_and_data_dir(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    data_dir = tmp_path / "data"
    monkeypatch.setenv("RINGBRIDGE_CONFIG", str(config_path))

    result = runner.invoke(
        app, ["init", "--data-dir", str(data_dir), "--refresh-token", "abc-123"]
    )

    assert result.exit_code == 0
    assert config_path.exists()
    assert 'refresh_token = "abc-123"' in config_path.read_text()
    assert (data_dir / "accessories.yaml").exists()


def test_sync_creates_then_reuses(configured):
    _, data_dir, snapshot_path = configured

    first = runner.invoke(app, ["sync", str(snapshot_path)])
    assert first.exit_code == 0, first.stdout
    assert "Front Door" in first.stdout
    assert "4 created" in first.stdout

    cached = FileAccessoryRegistry(data_dir).cached_accessories()
    names = {a.display_name for a in cached}
    assert names == {"Alarm", "Front Door", "Doorbell", "Home Mode"}

    get_settings.cache_clear()
    second = runner.invoke(app, ["sync", str(snapshot_path)])
    assert second.exit_code == 0, second.stdout
    assert "0 created" in second.stdout
    assert "4 reused" in second.stdout


def test_sync_persists_rotated_token(configured):
    config_path, _, snapshot_path = configured

    result = runner.invoke(app, ["sync", str(snapshot_path)])

    assert result.exit_code == 0
    assert "token-bbbb-2222" in config_path.read_text()
    assert "token-aaaa-1111" not in config_path.read_text()


def test_sync_requires_refresh_token(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    write_settings(
        Settings(database=DatabaseConfig(path=str(tmp_path / "data"))), config_path
    )
    monkeypatch.setenv("RINGBRIDGE_CONFIG", str(config_path))

    result = runner.invoke(app, ["sync", str(tmp_path / "home.yaml")])

    assert result.exit_code == 1
    assert "Not configured" in result.stdout


def test_sync_missing_snapshot_fails(configured, tmp_path):
    result = runner.invoke(app, ["sync", str(tmp_path / "absent.yaml")])

    assert result.exit_code == 1
    assert "Could not read directory snapshot" in result.stdout


def test_accessories_lists_registry(configured):
    _, _, snapshot_path = configured
    runner.invoke(app, ["sync", str(snapshot_path)])

    result = runner.invoke(app, ["accessories"])

    assert result.exit_code == 0
    assert "Doorbell" in result.stdout
    assert "camera" in result.stdout


def test_config_show_masks_token(configured):
    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    assert "token-aaaa-1111" not in result.stdout
    assert "toke...1111" in result.stdout

    raw = runner.invoke(app, ["config", "show", "--no-redact"])
    assert "token-aaaa-1111" in raw.stdout
