"""Tests for the visibility filter."""

from __future__ import annotations

from ringbridge.config import PlatformConfig
from ringbridge.core import is_visible, should_log_hidden
from ringbridge.models import AccessoryVariant, RingDeviceType

IDENTITY = "0b5f9a1c-6c1e-4d62-9a55-3c1d2c8f1f00"


def test_unclassified_is_hidden():
    assert not is_visible("sensor.contact", None, IDENTITY, PlatformConfig())


def test_visible_by_default():
    assert is_visible(
        RingDeviceType.ContactSensor,
        AccessoryVariant.CONTACT_SENSOR,
        IDENTITY,
        PlatformConfig(),
    )


def test_light_groups_hidden_only_when_configured():
    device_type = RingDeviceType.BeamsLightGroupSwitch
    variant = AccessoryVariant.BEAM

    assert is_visible(device_type, variant, IDENTITY, PlatformConfig())
    assert not is_visible(
        device_type, variant, IDENTITY, PlatformConfig(hide_light_groups=True)
    )
    assert is_visible(
        RingDeviceType.BeamsSwitch,
        variant,
        IDENTITY,
        PlatformConfig(hide_light_groups=True),
    )


def test_only_device_types_allow_list():
    config = PlatformConfig(only_device_types=[RingDeviceType.ContactSensor])

    assert is_visible(
        RingDeviceType.ContactSensor, AccessoryVariant.CONTACT_SENSOR, IDENTITY, config
    )
    assert not is_visible(
        RingDeviceType.MotionSensor, AccessoryVariant.MOTION_SENSOR, IDENTITY, config
    )


def test_empty_allow_list_allows_everything():
    config = PlatformConfig(only_device_types=[])
    assert is_visible("lock", AccessoryVariant.LOCK, IDENTITY, config)


def test_hide_list_wins_over_allow_list():
    config = PlatformConfig(
        hide_device_ids=[IDENTITY],
        only_device_types=[RingDeviceType.ContactSensor],
    )
    assert not is_visible(
        RingDeviceType.ContactSensor, AccessoryVariant.CONTACT_SENSOR, IDENTITY, config
    )


def test_infrastructure_types_are_hidden_quietly():
    assert not should_log_hidden(RingDeviceType.ZWaveAdapter)
    assert not should_log_hidden(RingDeviceType.PanicButton)
    assert not should_log_hidden(RingDeviceType.BeamsDevice)
    assert should_log_hidden(RingDeviceType.ContactSensor)
    assert should_log_hidden("something.new")
