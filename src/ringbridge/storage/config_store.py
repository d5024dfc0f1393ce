from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def _atomic_write(path: Path, contents: str) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(contents)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class ConfigStore:
    """Read-modify-write access to the persisted configuration file.

    Updates are serialized with a lock and land with an atomic replace, so a
    reader never observes a half-written file.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _update(self, updater: Callable[[str], str]) -> bool:
        contents = self._path.read_text(encoding="utf-8")
        updated = updater(contents)
        if updated == contents:
            return False
        _atomic_write(self._path, updated)
        return True

    async def update(self, updater: Callable[[str], str]) -> bool:
        """Apply ``updater`` to the file contents. Returns True if it changed."""
        async with self._lock:
            return await asyncio.to_thread(self._update, updater)

    async def replace_text(self, old: str, new: str) -> bool:
        changed = await self.update(lambda contents: contents.replace(old, new))
        logger.debug("Rewrote %s: %s", self._path, changed)
        return changed
