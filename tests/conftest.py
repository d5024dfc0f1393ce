from __future__ import annotations

import pytest

from ringbridge.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("RINGBRIDGE_CONFIG", raising=False)
    monkeypatch.delenv("RINGBRIDGE_DEBUG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
