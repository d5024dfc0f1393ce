"""Tests for synthetic panic-button and location-mode entries."""

from __future__ import annotations

import asyncio
import logging

from ringbridge.config import PlatformConfig
from ringbridge.core import StaticLocation, augment, candidate_for
from ringbridge.models import (
    AccessoryVariant,
    DeviceKind,
    Location,
    RemoteDevice,
    RingDeviceType,
)

PANEL = RemoteDevice(
    id="panel-1",
    name="Alarm",
    device_type=RingDeviceType.SecurityPanel,
    location_id="loc-1",
)
SENSOR = RemoteDevice(
    id="sensor-1",
    name="Front Door",
    device_type=RingDeviceType.ContactSensor,
    location_id="loc-1",
)


class ProbeCountingLocation(StaticLocation):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.probes = 0

    async def supports_location_mode_switching(self) -> bool:
        self.probes += 1
        return await super().supports_location_mode_switching()


def _location(devices=(PANEL, SENSOR), supports_mode_switching=False):
    return ProbeCountingLocation(
        Location(id="loc-1", name="Home"),
        devices=devices,
        supports_mode_switching=supports_mode_switching,
    )


def _augment(location, config):
    async def _run():
        devices = await location.get_devices()
        candidates = [candidate_for(device) for device in devices]
        return await augment(candidates, location, config)

    return asyncio.run(_run())


def test_no_synthetic_entries_by_default():
    location = _location()
    result = _augment(location, PlatformConfig())
    assert [c.seed_id for c in result] == ["panel-1", "sensor-1"]


def test_panic_buttons_bound_to_security_panel():
    result = _augment(_location(), PlatformConfig(show_panic_buttons=True))

    panic = result[-1]
    assert panic.seed_id == "panel-1panic"
    assert panic.name == "Panic Buttons"
    assert panic.variant is AccessoryVariant.PANIC_BUTTONS
    assert panic.device_type == RingDeviceType.SecurityPanel


def test_panic_buttons_need_a_security_panel():
    location = _location(devices=(SENSOR,))
    result = _augment(location, PlatformConfig(show_panic_buttons=True))
    assert all(c.variant is not AccessoryVariant.PANIC_BUTTONS for c in result)


def test_location_mode_switch_when_supported():
    location = _location(supports_mode_switching=True)
    result = _augment(location, PlatformConfig())

    mode = result[-1]
    assert mode.seed_id == "loc-1mode"
    assert mode.name == "Home Mode"
    assert mode.variant is AccessoryVariant.LOCATION_MODE_SWITCH
    assert mode.device_type == RingDeviceType.LocationMode
    assert mode.device.kind is DeviceKind.LOCATION


def test_location_mode_switch_skipped_when_unsupported(caplog):
    caplog.set_level(logging.DEBUG, logger="ringbridge.core.synthetic")
    location = _location(supports_mode_switching=False)
    result = _augment(location, PlatformConfig())

    assert location.probes == 1
    assert "does not expose a mode switch" in caplog.text
    assert all(c.variant is not AccessoryVariant.LOCATION_MODE_SWITCH for c in result)


def test_mode_probe_not_issued_when_polling_disabled(caplog):
    caplog.set_level(logging.DEBUG, logger="ringbridge.core.synthetic")
    location = _location(supports_mode_switching=True)
    result = _augment(location, PlatformConfig(location_mode_polling_seconds=0))

    assert location.probes == 0
    assert len(result) == 2
    assert "does not expose a mode switch" not in caplog.text
