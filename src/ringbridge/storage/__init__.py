from __future__ import annotations

from .config_store import ConfigStore
from .registry import FileAccessoryRegistry, HostRegistry, RegistryState

__all__ = [
    "ConfigStore",
    "FileAccessoryRegistry",
    "HostRegistry",
    "RegistryState",
]
