"""Tests for accessory identities."""

from __future__ import annotations

import re

from ringbridge.core import generate_mac_address, generate_uuid, resolve_identity
from ringbridge.core.identity import CAMERA_ROLE, PANIC_BUTTONS_ROLE

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def test_identity_is_stable():
    first = resolve_identity("", "12345", CAMERA_ROLE)
    second = resolve_identity("", "12345", CAMERA_ROLE)
    assert first == second


def test_identity_changes_with_role_and_prefix():
    base = resolve_identity("", "12345")
    assert resolve_identity("", "12345", CAMERA_ROLE) != base
    assert resolve_identity("", "12345", PANIC_BUTTONS_ROLE) != base
    assert resolve_identity("TEST ", "12345") != base


def test_identity_is_derived_from_concatenated_seed():
    assert resolve_identity("TEST ", "12345", "camera") == generate_uuid(
        "TEST 12345camera"
    )


def test_uuid_layout():
    for seed in ("a", "12345camera", "loc-1mode", ""):
        assert UUID_PATTERN.match(generate_uuid(seed))


def test_mac_address_layout():
    mac = generate_mac_address(generate_uuid("12345camera"))
    assert re.match(r"^([0-9A-F]{2}:){5}[0-9A-F]{2}$", mac)
    assert mac == generate_mac_address(generate_uuid("12345camera"))
    assert mac != generate_mac_address(generate_uuid("12345"))
