from __future__ import annotations

from ringbridge.config import PlatformConfig
from ringbridge.models import AccessoryVariant, RingDeviceType

# Infrastructure entries that are always excluded without a "hidden" notice.
QUIET_HIDDEN_TYPES = frozenset(
    {
        RingDeviceType.RingNetAdapter,
        RingDeviceType.ZigbeeAdapter,
        RingDeviceType.CodeVault,
        RingDeviceType.SecurityAccessCode,
        RingDeviceType.ZWaveAdapter,
        RingDeviceType.ZWaveExtender,
        RingDeviceType.BeamsDevice,
        RingDeviceType.PanicButton,
    }
)


def is_visible(
    device_type: str,
    variant: AccessoryVariant | None,
    identity: str,
    config: PlatformConfig,
) -> bool:
    if variant is None:
        return False
    if config.hide_light_groups and device_type == RingDeviceType.BeamsLightGroupSwitch:
        return False
    if identity in config.hide_device_ids:
        return False
    if config.only_device_types and device_type not in config.only_device_types:
        return False
    return True


def should_log_hidden(device_type: str) -> bool:
    return device_type not in QUIET_HIDDEN_TYPES
