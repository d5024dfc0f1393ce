"""Host accessory registry.

``HostRegistry`` is what the platform needs from the bridge runtime.
``FileAccessoryRegistry`` keeps bridged accessories in ``accessories.yaml``
inside the data directory so they survive restarts.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import BaseModel, Field, ValidationError

from ringbridge.models import PlatformAccessory

logger = logging.getLogger(__name__)

ACCESSORIES_FILE = "accessories.yaml"
PERSIST_DIR = "persist"
PERSIST_FILE_PREFIXES = ("AccessoryInfo", "IdentifierCache")


class HostRegistry(Protocol):
    async def register_platform_accessories(
        self, accessories: Sequence[PlatformAccessory]
    ) -> None: ...

    async def unregister_platform_accessories(
        self, accessories: Sequence[PlatformAccessory]
    ) -> None: ...

    async def publish_external_accessories(
        self, accessories: Sequence[PlatformAccessory]
    ) -> None: ...

    async def cleanup_accessory_data(self, mac_address: str) -> None: ...


class RegistryState(BaseModel):
    model_config = {"extra": "forbid"}

    accessories: list[PlatformAccessory] = Field(default_factory=list)
    external: list[PlatformAccessory] = Field(default_factory=list)


def _merge(
    current: list[PlatformAccessory], added: Sequence[PlatformAccessory]
) -> list[PlatformAccessory]:
    by_uuid = {accessory.uuid: accessory for accessory in current}
    for accessory in added:
        by_uuid[accessory.uuid] = accessory
    return list(by_uuid.values())


class FileAccessoryRegistry:
    """YAML-backed registry.

    Usage:
        registry = FileAccessoryRegistry(data_dir)
        for accessory in registry.cached_accessories():
            platform.configure_accessory(accessory)
    """

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._accessories_path = data_dir / ACCESSORIES_FILE
        self._persist_dir = data_dir / PERSIST_DIR

    @property
    def path(self) -> Path:
        return self._data_dir

    @property
    def accessories_path(self) -> Path:
        return self._accessories_path

    @property
    def persist_dir(self) -> Path:
        return self._persist_dir

    def ensure_dirs(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._persist_dir.mkdir(parents=True, exist_ok=True)

    def init(self, force: bool = False) -> bool:
        """Create the data directory. Returns True if a fresh registry was written."""
        self.ensure_dirs()
        if self._accessories_path.exists() and not force:
            return False
        self.save(RegistryState())
        return True

    def load(self) -> RegistryState:
        if not self._accessories_path.exists():
            return RegistryState()

        try:
            with self._accessories_path.open() as handle:
                data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(
                f"Invalid YAML in accessories file: {self._accessories_path}\n{exc}"
            ) from exc

        try:
            return RegistryState.model_validate(data)
        except ValidationError as exc:
            raise ValueError(
                f"Invalid accessories file: {self._accessories_path}\n{exc}"
            ) from exc

    def save(self, state: RegistryState) -> None:
        self.ensure_dirs()
        with self._accessories_path.open("w") as handle:
            handle.write("# ringbridge accessory cache\n")
            handle.write("# Managed by the bridge; edits are overwritten\n\n")
            yaml.dump(
                state.model_dump(mode="json"),
                handle,
                default_flow_style=False,
                sort_keys=False,
            )

    def cached_accessories(self) -> list[PlatformAccessory]:
        return self.load().accessories

    def external_accessories(self) -> list[PlatformAccessory]:
        return self.load().external

    def _register(self, accessories: Sequence[PlatformAccessory]) -> None:
        added = {accessory.uuid for accessory in accessories}
        state = self.load()
        state.accessories = _merge(state.accessories, accessories)
        state.external = [a for a in state.external if a.uuid not in added]
        self.save(state)

    def _unregister(self, accessories: Sequence[PlatformAccessory]) -> None:
        removed = {accessory.uuid for accessory in accessories}
        state = self.load()
        state.accessories = [a for a in state.accessories if a.uuid not in removed]
        self.save(state)

    def _publish_external(self, accessories: Sequence[PlatformAccessory]) -> None:
        published = {accessory.uuid for accessory in accessories}
        state = self.load()
        state.external = _merge(state.external, accessories)
        state.accessories = [a for a in state.accessories if a.uuid not in published]
        self.save(state)

    def reset_external(self) -> None:
        """Forget external accessories published by an earlier run.

        External publications only last as long as the host process, so each
        run starts with none and republishes what its pass decides.
        """
        state = self.load()
        if state.external:
            state.external = []
            self.save(state)

    def _cleanup(self, mac_address: str) -> list[Path]:
        token = mac_address.replace(":", "").upper()
        removed: list[Path] = []
        for prefix in PERSIST_FILE_PREFIXES:
            path = self._persist_dir / f"{prefix}.{token}.json"
            if path.exists():
                path.unlink()
                removed.append(path)
        return removed

    async def register_platform_accessories(
        self, accessories: Sequence[PlatformAccessory]
    ) -> None:
        await asyncio.to_thread(self._register, accessories)
        logger.debug("Registered %d accessories", len(accessories))

    async def unregister_platform_accessories(
        self, accessories: Sequence[PlatformAccessory]
    ) -> None:
        await asyncio.to_thread(self._unregister, accessories)
        logger.debug("Unregistered %d accessories", len(accessories))

    async def publish_external_accessories(
        self, accessories: Sequence[PlatformAccessory]
    ) -> None:
        await asyncio.to_thread(self._publish_external, accessories)
        logger.debug("Published %d external accessories", len(accessories))

    async def cleanup_accessory_data(self, mac_address: str) -> None:
        removed = await asyncio.to_thread(self._cleanup, mac_address)
        for path in removed:
            logger.debug("Removed legacy accessory data %s", path)
