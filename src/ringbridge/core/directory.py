"""Boundary with the remote device directory.

The transport and auth protocol live outside this package. The platform only
relies on the protocols below. ``SnapshotDirectory`` serves a directory from a
YAML file for development and tests.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import BaseModel, Field, ValidationError

from ringbridge.models import DeviceKind, Location, RemoteDevice

logger = logging.getLogger(__name__)


class DirectoryError(RuntimeError):
    """The directory is unreachable or rejected our credentials."""


@dataclass(frozen=True)
class TokenRotation:
    old_token: str | None
    new_token: str


class DirectoryLocation(Protocol):
    @property
    def location(self) -> Location: ...

    @property
    def cameras(self) -> Sequence[RemoteDevice]: ...

    @property
    def chimes(self) -> Sequence[RemoteDevice]: ...

    @property
    def intercoms(self) -> Sequence[RemoteDevice]: ...

    async def get_devices(self) -> list[RemoteDevice]: ...

    async def supports_location_mode_switching(self) -> bool: ...


class DirectoryService(Protocol):
    async def get_locations(self) -> list[DirectoryLocation]: ...

    def refresh_token_updates(self) -> AsyncIterator[TokenRotation]: ...


# Snapshot file models


class SnapshotDevice(BaseModel):
    model_config = {"extra": "forbid", "coerce_numbers_to_str": True}

    id: str
    name: str
    device_type: str
    category_id: int | None = None
    status: str | None = None


class SnapshotLocation(BaseModel):
    model_config = {"extra": "forbid", "coerce_numbers_to_str": True}

    id: str
    name: str
    supports_mode_switching: bool = False
    devices: list[SnapshotDevice] = Field(default_factory=list)
    cameras: list[SnapshotDevice] = Field(default_factory=list)
    chimes: list[SnapshotDevice] = Field(default_factory=list)
    intercoms: list[SnapshotDevice] = Field(default_factory=list)


class SnapshotRotation(BaseModel):
    model_config = {"extra": "forbid"}

    old_token: str | None = None
    new_token: str


class DirectorySnapshot(BaseModel):
    model_config = {"extra": "forbid"}

    locations: list[SnapshotLocation] = Field(default_factory=list)
    refresh_token_updates: list[SnapshotRotation] = Field(default_factory=list)


def _to_remote(
    entries: list[SnapshotDevice], location_id: str, kind: DeviceKind
) -> list[RemoteDevice]:
    return [
        RemoteDevice(
            id=entry.id,
            name=entry.name,
            device_type=entry.device_type,
            category_id=entry.category_id,
            status=entry.status,
            location_id=location_id,
            kind=kind,
        )
        for entry in entries
    ]


class StaticLocation:
    """A location whose devices are known up front."""

    def __init__(
        self,
        location: Location,
        devices: Sequence[RemoteDevice] = (),
        cameras: Sequence[RemoteDevice] = (),
        chimes: Sequence[RemoteDevice] = (),
        intercoms: Sequence[RemoteDevice] = (),
        supports_mode_switching: bool = False,
    ) -> None:
        self._location = location
        self._devices = list(devices)
        self._cameras = list(cameras)
        self._chimes = list(chimes)
        self._intercoms = list(intercoms)
        self._supports_mode_switching = supports_mode_switching

    @classmethod
    def from_snapshot(cls, snapshot: SnapshotLocation) -> StaticLocation:
        location_id = snapshot.id
        return cls(
            Location(id=location_id, name=snapshot.name),
            devices=_to_remote(snapshot.devices, location_id, DeviceKind.DEVICE),
            cameras=_to_remote(snapshot.cameras, location_id, DeviceKind.CAMERA),
            chimes=_to_remote(snapshot.chimes, location_id, DeviceKind.CHIME),
            intercoms=_to_remote(snapshot.intercoms, location_id, DeviceKind.INTERCOM),
            supports_mode_switching=snapshot.supports_mode_switching,
        )

    @property
    def location(self) -> Location:
        return self._location

    @property
    def cameras(self) -> Sequence[RemoteDevice]:
        return self._cameras

    @property
    def chimes(self) -> Sequence[RemoteDevice]:
        return self._chimes

    @property
    def intercoms(self) -> Sequence[RemoteDevice]:
        return self._intercoms

    async def get_devices(self) -> list[RemoteDevice]:
        return list(self._devices)

    async def supports_location_mode_switching(self) -> bool:
        return self._supports_mode_switching


class SnapshotDirectory:
    """Directory served from a YAML snapshot.

    Usage:
        directory = SnapshotDirectory.load(Path("home.yaml"))
        locations = await directory.get_locations()
    """

    def __init__(
        self,
        locations: Sequence[StaticLocation],
        rotations: Sequence[TokenRotation] = (),
    ) -> None:
        self._locations = list(locations)
        self._rotations = list(rotations)

    @classmethod
    def load(cls, path: Path) -> SnapshotDirectory:
        try:
            with path.open() as handle:
                data = yaml.safe_load(handle) or {}
        except OSError as exc:
            raise DirectoryError(f"Could not read directory snapshot: {path}") from exc
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in snapshot file: {path}\n{exc}") from exc

        try:
            snapshot = DirectorySnapshot.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid snapshot file: {path}\n{exc}") from exc

        logger.debug(
            "Loaded snapshot %s with %d locations", path, len(snapshot.locations)
        )
        return cls(
            [StaticLocation.from_snapshot(entry) for entry in snapshot.locations],
            [
                TokenRotation(old_token=entry.old_token, new_token=entry.new_token)
                for entry in snapshot.refresh_token_updates
            ],
        )

    async def get_locations(self) -> list[DirectoryLocation]:
        return list(self._locations)

    async def refresh_token_updates(self) -> AsyncIterator[TokenRotation]:
        for rotation in self._rotations:
            yield rotation
