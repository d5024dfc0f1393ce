"""Data models for ringbridge."""

from ringbridge.models.accessories import (
    AccessoryCategory,
    AccessoryVariant,
    PlatformAccessory,
)
from ringbridge.models.devices import (
    DeviceKind,
    Location,
    RemoteDevice,
    RingDeviceCategory,
    RingDeviceType,
)

__all__ = [
    "AccessoryCategory",
    "AccessoryVariant",
    "DeviceKind",
    "Location",
    "PlatformAccessory",
    "RemoteDevice",
    "RingDeviceCategory",
    "RingDeviceType",
]
