from __future__ import annotations

from .candidates import Candidate, candidate_for
from .classifier import classify
from .directory import (
    DirectoryError,
    DirectoryLocation,
    DirectoryService,
    SnapshotDirectory,
    StaticLocation,
    TokenRotation,
)
from .identity import generate_mac_address, generate_uuid, resolve_identity
from .platform import RingPlatform
from .reconcile import AccessoryBinding, ReconcileResult, reconcile
from .rotation import CredentialRotationListener
from .synthetic import augment
from .visibility import is_visible, should_log_hidden

__all__ = [
    "AccessoryBinding",
    "Candidate",
    "CredentialRotationListener",
    "DirectoryError",
    "DirectoryLocation",
    "DirectoryService",
    "ReconcileResult",
    "RingPlatform",
    "SnapshotDirectory",
    "StaticLocation",
    "TokenRotation",
    "augment",
    "candidate_for",
    "classify",
    "generate_mac_address",
    "generate_uuid",
    "is_visible",
    "reconcile",
    "resolve_identity",
    "should_log_hidden",
]
