from __future__ import annotations

from dataclasses import dataclass

from ringbridge.models import AccessoryVariant, RemoteDevice

from .classifier import classify
from .identity import CAMERA_ROLE


@dataclass(frozen=True)
class Candidate:
    """A directory entry on its way into the registry.

    ``seed_id`` is the device id plus its role suffix and is what the
    accessory identity is derived from.
    """

    device: RemoteDevice
    seed_id: str
    name: str
    variant: AccessoryVariant | None

    @property
    def device_type(self) -> str:
        return self.device.device_type

    @property
    def is_camera(self) -> bool:
        return self.device.is_camera


def candidate_for(device: RemoteDevice) -> Candidate:
    # Cameras carry a role suffix so bridged entries cached before cameras
    # could be unbridged are treated as stale.
    role = CAMERA_ROLE if device.is_camera else ""
    return Candidate(
        device=device,
        seed_id=f"{device.id}{role}",
        name=device.name,
        variant=classify(device),
    )
