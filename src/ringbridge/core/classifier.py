from __future__ import annotations

import re

from ringbridge.models import (
    AccessoryVariant,
    DeviceKind,
    RemoteDevice,
    RingDeviceCategory,
    RingDeviceType,
)

DISABLED_STATUS = "disabled"

_LOCK_TYPE = re.compile(r"^lock($|\.)")

_KIND_VARIANTS: dict[DeviceKind, AccessoryVariant] = {
    DeviceKind.CAMERA: AccessoryVariant.CAMERA,
    DeviceKind.CHIME: AccessoryVariant.CHIME,
    DeviceKind.INTERCOM: AccessoryVariant.INTERCOM,
}

_TYPE_VARIANTS: dict[str, AccessoryVariant] = {
    RingDeviceType.ContactSensor: AccessoryVariant.CONTACT_SENSOR,
    RingDeviceType.RetrofitZone: AccessoryVariant.CONTACT_SENSOR,
    RingDeviceType.TiltSensor: AccessoryVariant.CONTACT_SENSOR,
    RingDeviceType.GlassbreakSensor: AccessoryVariant.CONTACT_SENSOR,
    RingDeviceType.MotionSensor: AccessoryVariant.MOTION_SENSOR,
    RingDeviceType.FloodFreezeSensor: AccessoryVariant.FLOOD_FREEZE_SENSOR,
    RingDeviceType.FreezeSensor: AccessoryVariant.FREEZE_SENSOR,
    RingDeviceType.SecurityPanel: AccessoryVariant.SECURITY_PANEL,
    RingDeviceType.BaseStation: AccessoryVariant.BRIGHTNESS_ONLY,
    RingDeviceType.BaseStationPro: AccessoryVariant.BRIGHTNESS_ONLY,
    RingDeviceType.Keypad: AccessoryVariant.BRIGHTNESS_ONLY,
    RingDeviceType.SmokeAlarm: AccessoryVariant.SMOKE_ALARM,
    RingDeviceType.CoAlarm: AccessoryVariant.CO_ALARM,
    RingDeviceType.SmokeCoListener: AccessoryVariant.SMOKE_CO_LISTENER,
    RingDeviceType.BeamsMotionSensor: AccessoryVariant.BEAM,
    RingDeviceType.BeamsSwitch: AccessoryVariant.BEAM,
    RingDeviceType.BeamsMultiLevelSwitch: AccessoryVariant.BEAM,
    RingDeviceType.BeamsTransformerSwitch: AccessoryVariant.BEAM,
    RingDeviceType.BeamsLightGroupSwitch: AccessoryVariant.BEAM,
    RingDeviceType.MultiLevelBulb: AccessoryVariant.MULTI_LEVEL_SWITCH,
    RingDeviceType.TemperatureSensor: AccessoryVariant.TEMPERATURE_SENSOR,
    RingDeviceType.WaterSensor: AccessoryVariant.WATER_SENSOR,
    RingDeviceType.Thermostat: AccessoryVariant.THERMOSTAT,
    RingDeviceType.UnknownZWave: AccessoryVariant.UNKNOWN_ZWAVE_SWITCH,
}


def _classify_by_category(device: RemoteDevice) -> AccessoryVariant | None:
    if device.device_type == RingDeviceType.MultiLevelSwitch:
        if device.category_id == RingDeviceCategory.Fans:
            return AccessoryVariant.FAN
        return AccessoryVariant.MULTI_LEVEL_SWITCH
    if device.device_type == RingDeviceType.Switch:
        if device.category_id == RingDeviceCategory.Outlets:
            return AccessoryVariant.OUTLET
        return AccessoryVariant.SWITCH
    return None


def classify(device: RemoteDevice) -> AccessoryVariant | None:
    """Pick the accessory variant for ``device``, or None when unsupported.

    A generic ``sensor`` is only known to report a faulted state, so its name
    decides between motion and contact. That is a best-effort guess.
    """
    if device.status == DISABLED_STATUS:
        return None

    kind_variant = _KIND_VARIANTS.get(device.kind)
    if kind_variant is not None:
        return kind_variant

    variant = _TYPE_VARIANTS.get(device.device_type) or _classify_by_category(device)
    if variant is not None:
        return variant

    if _LOCK_TYPE.match(device.device_type):
        return AccessoryVariant.LOCK

    if device.device_type == RingDeviceType.Sensor:
        if "motion" in device.name.lower():
            return AccessoryVariant.MOTION_SENSOR
        return AccessoryVariant.CONTACT_SENSOR

    return None
