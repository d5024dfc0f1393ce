"""Accessory models kept in the host registry."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, Field


class AccessoryVariant(str, Enum):
    """Behavior class an accessory is bound to."""

    CONTACT_SENSOR = "contact-sensor"
    MOTION_SENSOR = "motion-sensor"
    FLOOD_FREEZE_SENSOR = "flood-freeze-sensor"
    FREEZE_SENSOR = "freeze-sensor"
    TEMPERATURE_SENSOR = "temperature-sensor"
    WATER_SENSOR = "water-sensor"
    SECURITY_PANEL = "security-panel"
    BRIGHTNESS_ONLY = "brightness-only"
    SMOKE_ALARM = "smoke-alarm"
    CO_ALARM = "co-alarm"
    SMOKE_CO_LISTENER = "smoke-co-listener"
    BEAM = "beam"
    FAN = "fan"
    MULTI_LEVEL_SWITCH = "multi-level-switch"
    OUTLET = "outlet"
    SWITCH = "switch"
    THERMOSTAT = "thermostat"
    UNKNOWN_ZWAVE_SWITCH = "unknown-zwave-switch"
    LOCK = "lock"
    CAMERA = "camera"
    CHIME = "chime"
    INTERCOM = "intercom"
    PANIC_BUTTONS = "panic-buttons"
    LOCATION_MODE_SWITCH = "location-mode-switch"


class AccessoryCategory(IntEnum):
    """Host category hints (HomeKit accessory categories)."""

    SECURITY_SYSTEM = 11
    CAMERA = 17


class PlatformAccessory(BaseModel):
    """Accessory entry persisted by the host.

    ``context`` is host-managed state and is carried over untouched when an
    accessory is reused.
    """

    model_config = {"extra": "forbid"}

    uuid: str
    display_name: str
    category: AccessoryCategory = AccessoryCategory.SECURITY_SYSTEM
    context: dict[str, Any] = Field(default_factory=dict)
