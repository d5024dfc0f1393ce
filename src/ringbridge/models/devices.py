"""Device models reported by the Ring directory."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class RingDeviceType:
    """Device type tags used by the directory."""

    BaseStation = "hub.redsky"
    BaseStationPro = "hub.kili"
    Keypad = "security-keypad"
    SecurityPanel = "security-panel"
    ContactSensor = "sensor.contact"
    MotionSensor = "sensor.motion"
    FloodFreezeSensor = "sensor.flood-freeze"
    FreezeSensor = "sensor.freeze"
    TemperatureSensor = "sensor.temperature"
    WaterSensor = "sensor.water"
    TiltSensor = "sensor.tilt"
    GlassbreakSensor = "sensor.glassbreak"
    RetrofitZone = "sensor.zone"
    RetrofitBridge = "bridge.flatline"
    Sensor = "sensor"
    SmokeAlarm = "alarm.smoke"
    CoAlarm = "alarm.co"
    SmokeCoListener = "listener.smoke-co"
    MultiLevelSwitch = "switch.multilevel"
    MultiLevelBulb = "switch.multilevel.bulb"
    Switch = "switch"
    BeamsMotionSensor = "motion-sensor.beams"
    BeamsSwitch = "switch.beams"
    BeamsMultiLevelSwitch = "switch.multilevel.beams"
    BeamsTransformerSwitch = "switch.transformer.beams"
    BeamsLightGroupSwitch = "group.light-group.beams"
    BeamsDevice = "device.beams"
    Thermostat = "temperature-control.thermostat"
    RingNetAdapter = "adapter.ringnet"
    ZigbeeAdapter = "adapter.zigbee"
    ZWaveAdapter = "adapter.zwave"
    ZWaveExtender = "range-extender.zwave"
    CodeVault = "access-code.vault"
    SecurityAccessCode = "access-code"
    PanicButton = "security-panic"
    UnknownZWave = "unknown.zwave"
    LocationMode = "location.mode"


class RingDeviceCategory:
    Outlets = 1
    Lights = 2
    Sensors = 5
    Locks = 10
    Thermostats = 11
    Cameras = 12
    Alarms = 15
    Fans = 17


class DeviceKind(str, Enum):
    """Structural kind of a directory entry."""

    DEVICE = "device"
    CAMERA = "camera"
    CHIME = "chime"
    INTERCOM = "intercom"
    LOCATION = "location"


class RemoteDevice(BaseModel):
    """Snapshot of a device as reported by the directory for one pass."""

    model_config = {"frozen": True, "extra": "forbid", "coerce_numbers_to_str": True}

    id: str
    name: str
    device_type: str
    location_id: str
    kind: DeviceKind = DeviceKind.DEVICE
    category_id: int | None = None
    status: str | None = None

    @property
    def is_camera(self) -> bool:
        return self.kind is DeviceKind.CAMERA


class Location(BaseModel):
    model_config = {"frozen": True, "extra": "forbid", "coerce_numbers_to_str": True}

    id: str
    name: str
