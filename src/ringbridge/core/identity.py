"""Stable accessory identities.

Identities follow the HomeKit accessory UUID scheme: the SHA-1 digest of the
seed laid out as a version-4 style UUID. Keeping the exact scheme means caches
written by earlier bridges keep matching.
"""

from __future__ import annotations

import hashlib

CAMERA_ROLE = "camera"
PANIC_BUTTONS_ROLE = "panic"
LOCATION_MODE_ROLE = "mode"

_UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def generate_uuid(seed: str) -> str:
    digest = hashlib.sha1(seed.encode("utf-8")).hexdigest()
    chars: list[str] = []
    index = 0
    for slot in _UUID_TEMPLATE:
        if slot == "x":
            chars.append(digest[index])
            index += 1
        elif slot == "y":
            chars.append(format((int(digest[index], 16) & 0x3) | 0x8, "x"))
            index += 1
        else:
            chars.append(slot)
    return "".join(chars)


def resolve_identity(debug_prefix: str, device_id: str, role_suffix: str = "") -> str:
    return generate_uuid(f"{debug_prefix}{device_id}{role_suffix}")


def generate_mac_address(seed: str) -> str:
    """Derive a MAC-like address (``AA:BB:CC:DD:EE:FF``) from ``seed``."""
    digest = hashlib.sha1(seed.encode("utf-8")).hexdigest()
    pairs = [digest[i : i + 2] for i in range(0, 12, 2)]
    return ":".join(pair.upper() for pair in pairs)
