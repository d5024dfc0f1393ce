"""Engine-internal devices that the directory does not list itself."""

from __future__ import annotations

import logging

from ringbridge.config import PlatformConfig
from ringbridge.models import AccessoryVariant, DeviceKind, RemoteDevice, RingDeviceType

from .candidates import Candidate
from .directory import DirectoryLocation
from .identity import LOCATION_MODE_ROLE, PANIC_BUTTONS_ROLE

logger = logging.getLogger(__name__)

PANIC_BUTTONS_NAME = "Panic Buttons"


def find_security_panel(candidates: list[Candidate]) -> RemoteDevice | None:
    for candidate in candidates:
        device = candidate.device
        if (
            device.kind is DeviceKind.DEVICE
            and device.device_type == RingDeviceType.SecurityPanel
        ):
            return device
    return None


def panic_buttons_candidate(panel: RemoteDevice) -> Candidate:
    return Candidate(
        device=panel,
        seed_id=f"{panel.id}{PANIC_BUTTONS_ROLE}",
        name=PANIC_BUTTONS_NAME,
        variant=AccessoryVariant.PANIC_BUTTONS,
    )


def location_mode_candidate(location: DirectoryLocation) -> Candidate:
    info = location.location
    device = RemoteDevice(
        id=info.id,
        name=info.name,
        device_type=RingDeviceType.LocationMode,
        location_id=info.id,
        kind=DeviceKind.LOCATION,
    )
    return Candidate(
        device=device,
        seed_id=f"{info.id}{LOCATION_MODE_ROLE}",
        name=f"{info.name} Mode",
        variant=AccessoryVariant.LOCATION_MODE_SWITCH,
    )


async def augment(
    candidates: list[Candidate],
    location: DirectoryLocation,
    config: PlatformConfig,
) -> list[Candidate]:
    """Return ``candidates`` plus the panic-button and location-mode entries.

    The mode probe is only issued when location-mode polling is enabled.
    """
    augmented = list(candidates)

    if config.show_panic_buttons:
        panel = find_security_panel(candidates)
        if panel is not None:
            augmented.append(panic_buttons_candidate(panel))

    if config.location_mode_polling_seconds:
        if await location.supports_location_mode_switching():
            augmented.append(location_mode_candidate(location))
        else:
            logger.debug(
                "Location %s does not expose a mode switch", location.location.id
            )

    return augmented
