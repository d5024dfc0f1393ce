"""ringbridge - expose Ring devices as stable, persistent bridge accessories."""

from __future__ import annotations

from importlib.metadata import version

from .config import PlatformConfig, Settings, get_settings
from .core import ReconcileResult, RingPlatform, SnapshotDirectory, reconcile
from .models import AccessoryVariant, PlatformAccessory, RemoteDevice
from .storage import ConfigStore, FileAccessoryRegistry

__all__ = [
    "AccessoryVariant",
    "ConfigStore",
    "FileAccessoryRegistry",
    "PlatformAccessory",
    "PlatformConfig",
    "ReconcileResult",
    "RemoteDevice",
    "RingPlatform",
    "Settings",
    "SnapshotDirectory",
    "__version__",
    "get_settings",
    "reconcile",
]

__version__ = version("ringbridge")
