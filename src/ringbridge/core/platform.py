"""Ring platform: one reconciliation pass per bridge start."""

from __future__ import annotations

import asyncio
import logging

from ringbridge.config import PlatformConfig
from ringbridge.models import PlatformAccessory
from ringbridge.storage import ConfigStore, HostRegistry
from ringbridge.utils.logging import activity_logger

from .candidates import Candidate, candidate_for
from .directory import DirectoryError, DirectoryLocation, DirectoryService
from .reconcile import ReconcileResult, reconcile
from .rotation import CredentialRotationListener
from .synthetic import augment

logger = logging.getLogger(__name__)


class RingPlatform:
    """Bind Ring directory devices to host accessories.

    The host calls ``configure_accessory`` for every cached accessory and then
    ``did_finish_launching`` once it is ready. The platform owns the cache of
    bridged accessories between those calls.
    """

    def __init__(
        self,
        config: PlatformConfig,
        directory: DirectoryService,
        registry: HostRegistry,
        config_store: ConfigStore | None = None,
        log: logging.Logger = logger,
    ) -> None:
        self.config = config
        self._directory = directory
        self._registry = registry
        self._config_store = config_store
        self._log = log
        self._activity = activity_logger(log, enabled=not config.disable_logs)
        self.accessories: dict[str, PlatformAccessory] = {}
        self.rotation_listener: CredentialRotationListener | None = None

    def configure_accessory(self, accessory: PlatformAccessory) -> None:
        self._activity.info(
            "Configuring cached accessory %s %s",
            accessory.uuid,
            accessory.display_name,
        )
        self.accessories[accessory.uuid] = accessory

    async def did_finish_launching(self) -> ReconcileResult | None:
        """Run the pass. Failures are logged and leave the cache as it was."""
        self._log.debug("didFinishLaunching")
        if not self.config.refresh_token:
            self._log.warning(
                "Plugin is not configured. Set platform.refresh_token in config.toml."
            )
            return None

        try:
            candidates = await self.discover()
        except (DirectoryError, ConnectionError, OSError) as exc:
            self._log.error("Error connecting to API: %s", exc)
            return None
        except Exception:
            self._log.exception("Unexpected error while listing devices")
            return None

        result = reconcile(candidates, self.accessories, self.config, self._activity)
        try:
            await self.apply(result)
        except OSError as exc:
            self._log.error("Error updating accessory registry: %s", exc)
            return None

        self.start_rotation_listener()
        return result

    async def discover(self) -> list[Candidate]:
        """List every location's candidates. Nothing is touched on failure."""
        locations = await self._directory.get_locations()

        self._activity.info("Found the following locations:")
        for location in locations:
            info = location.location
            self._activity.info("  locationId: %s - %s", info.id, info.name)

        # staleness is defined over every location, so wait for all of them
        per_location = await asyncio.gather(
            *(self._collect(location) for location in locations)
        )
        return [candidate for batch in per_location for candidate in batch]

    async def sync(self) -> ReconcileResult:
        candidates = await self.discover()
        result = reconcile(candidates, self.accessories, self.config, self._activity)
        await self.apply(result)
        return result

    async def _collect(self, location: DirectoryLocation) -> list[Candidate]:
        devices = await location.get_devices()
        entries = [
            *devices,
            *location.cameras,
            *location.chimes,
            *location.intercoms,
        ]
        candidates = [candidate_for(device) for device in entries]
        candidates = await augment(candidates, location, self.config)

        info = location.location
        self._activity.info(
            'Configuring %d cameras and %d devices for location "%s" - '
            "locationId: %s",
            len(location.cameras),
            len(candidates),
            info.name,
            info.id,
        )
        return candidates

    async def apply(self, result: ReconcileResult) -> None:
        """Push a reconciliation result to the host in batched calls."""
        if result.unbridge:
            await self._registry.unregister_platform_accessories(result.unbridge)

        for mac_address in result.cleanup_addresses:
            await self._registry.cleanup_accessory_data(mac_address)

        if result.create:
            await self._registry.register_platform_accessories(result.create)

        if result.publish_external:
            await self._registry.publish_external_accessories(result.publish_external)

        for accessory in result.stale:
            self._activity.info(
                "Removing stale cached accessory %s %s",
                accessory.uuid,
                accessory.display_name,
            )
        if result.stale:
            await self._registry.unregister_platform_accessories(result.stale)

        self.accessories = result.bridged_accessories()

    def start_rotation_listener(self) -> CredentialRotationListener | None:
        if self._config_store is None:
            return None
        if self.rotation_listener is not None:
            return self.rotation_listener

        self.rotation_listener = CredentialRotationListener(
            self._directory.refresh_token_updates(), self._config_store, self._log
        )
        self.rotation_listener.start()
        return self.rotation_listener

    async def shutdown(self) -> None:
        if self.rotation_listener is not None:
            await self.rotation_listener.stop()
