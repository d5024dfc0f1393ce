"""Diff live directory entries against the cached accessory registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ringbridge.config import PlatformConfig
from ringbridge.models import AccessoryCategory, AccessoryVariant, PlatformAccessory

from .candidates import Candidate
from .identity import generate_mac_address, resolve_identity
from .visibility import is_visible, should_log_hidden

logger = logging.getLogger(__name__)

Log = logging.Logger | logging.LoggerAdapter


@dataclass(frozen=True)
class AccessoryBinding:
    """An accessory paired with the directory entry that drives it."""

    accessory: PlatformAccessory
    candidate: Candidate
    variant: AccessoryVariant
    created: bool
    external: bool


@dataclass(frozen=True)
class HiddenCandidate:
    identity: str
    display_name: str
    candidate: Candidate


@dataclass
class ReconcileResult:
    bound: dict[str, AccessoryBinding] = field(default_factory=dict)
    create: list[PlatformAccessory] = field(default_factory=list)
    publish_external: list[PlatformAccessory] = field(default_factory=list)
    reuse: list[PlatformAccessory] = field(default_factory=list)
    unbridge: list[PlatformAccessory] = field(default_factory=list)
    stale: list[PlatformAccessory] = field(default_factory=list)
    hidden: list[HiddenCandidate] = field(default_factory=list)
    duplicates: list[Candidate] = field(default_factory=list)
    cleanup_addresses: list[str] = field(default_factory=list)

    @property
    def active_ids(self) -> list[str]:
        return list(self.bound)

    def bridged_accessories(self) -> dict[str, PlatformAccessory]:
        """Accessories the host keeps in its bridged cache after this pass."""
        return {
            uuid: binding.accessory
            for uuid, binding in self.bound.items()
            if not binding.external
        }


def build_accessory(
    display_name: str, identity: str, candidate: Candidate
) -> PlatformAccessory:
    category = (
        AccessoryCategory.CAMERA
        if candidate.is_camera
        else AccessoryCategory.SECURITY_SYSTEM
    )
    return PlatformAccessory(
        uuid=identity, display_name=display_name, category=category
    )


def reconcile(
    candidates: Iterable[Candidate],
    cache: Mapping[str, PlatformAccessory],
    config: PlatformConfig,
    log: Log = logger,
) -> ReconcileResult:
    """Compute the registry changes for one pass.

    ``cache`` is not modified. The caller applies the returned result: the
    ``unbridge`` batch first, then ``create``, ``publish_external`` and finally
    ``stale``.
    """
    prefix = config.debug_prefix
    result = ReconcileResult()
    working = dict(cache)

    for candidate in candidates:
        identity = resolve_identity(prefix, candidate.seed_id)
        display_name = f"{prefix}{candidate.name}"
        device_type = candidate.device_type

        variant = candidate.variant
        if variant is None or not is_visible(device_type, variant, identity, config):
            result.hidden.append(HiddenCandidate(identity, display_name, candidate))
            if should_log_hidden(device_type):
                log.info(
                    "Hidden accessory %s %s %s", identity, device_type, display_name
                )
            continue

        if identity in result.bound:
            log.warning(
                "Skipping %s %s: identity %s is already bound to %s",
                device_type,
                display_name,
                identity,
                result.bound[identity].accessory.display_name,
            )
            result.duplicates.append(candidate)
            continue

        external = candidate.is_camera and config.unbridge_cameras
        existing = working.get(identity)

        if external and existing is not None:
            log.warning(
                "Camera %s was previously bridged. "
                "You will need to manually pair it as a new accessory.",
                display_name,
            )
            result.unbridge.append(existing)
            del working[identity]
            existing = None

        if existing is not None:
            result.reuse.append(existing)
            result.bound[identity] = AccessoryBinding(
                existing, candidate, variant, created=False, external=False
            )
            continue

        accessory = build_accessory(display_name, identity, candidate)
        if external:
            log.info("Configured camera %s %s %s", identity, device_type, display_name)
            result.publish_external.append(accessory)
        else:
            log.info(
                "Adding new accessory %s %s %s", identity, device_type, display_name
            )
            result.create.append(accessory)
            if candidate.is_camera:
                # drop persist files left by an earlier unbridged publish
                result.cleanup_addresses.append(generate_mac_address(identity))

        result.bound[identity] = AccessoryBinding(
            accessory, candidate, variant, created=True, external=external
        )

    result.stale = [
        accessory for uuid, accessory in cache.items() if uuid not in result.bound
    ]
    return result
