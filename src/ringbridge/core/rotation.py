"""Persist refresh tokens rotated by the directory."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

from ringbridge.storage import ConfigStore
from ringbridge.utils.redaction import Redactor

from .directory import DirectoryError, TokenRotation

logger = logging.getLogger(__name__)


class CredentialRotationListener:
    """Watch the token stream and rewrite the config file for each rotation.

    The subscription and the file writer run as two tasks joined by a queue,
    so rewrites happen one at a time and in arrival order no matter how fast
    rotations come in.
    """

    def __init__(
        self,
        updates: AsyncIterator[TokenRotation],
        store: ConfigStore,
        log: logging.Logger | logging.LoggerAdapter = logger,
    ) -> None:
        self._updates = updates
        self._store = store
        self._log = log
        self._redactor = Redactor()
        self._queue: asyncio.Queue[tuple[str, str] | None] = asyncio.Queue()
        self._tasks: list[asyncio.Task[None]] = []
        self.persisted = 0

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def start(self) -> None:
        if self._tasks:
            raise RuntimeError("Rotation listener already started")
        self._tasks = [
            asyncio.create_task(self._listen(), name="token-rotation-listener"),
            asyncio.create_task(self._persist(), name="token-rotation-writer"),
        ]

    async def join(self) -> None:
        """Wait until the stream ends and every queued rotation is written."""
        await asyncio.gather(*self._tasks)

    async def stop(self) -> None:
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _listen(self) -> None:
        try:
            async for rotation in self._updates:
                if not rotation.old_token:
                    continue
                self._queue.put_nowait((rotation.old_token, rotation.new_token))
        except DirectoryError as exc:
            self._log.error("Refresh token subscription failed: %s", exc)
        finally:
            self._queue.put_nowait(None)

    async def _persist(self) -> None:
        while True:
            rotation = await self._queue.get()
            if rotation is None:
                return
            old_token, new_token = rotation
            try:
                changed = await self._store.replace_text(old_token, new_token)
            except (OSError, ValueError) as exc:
                # keep draining the queue after a failed write
                self._log.error(
                    "Failed to persist refresh token to %s: %s", self._store.path, exc
                )
                continue

            if changed:
                self.persisted += 1
                self._log.info(
                    "Refresh token %s rotated to %s in %s",
                    self._redactor.redact_token(old_token),
                    self._redactor.redact_token(new_token),
                    self._store.path,
                )
            else:
                self._log.debug(
                    "Refresh token %s not found in %s",
                    self._redactor.redact_token(old_token),
                    self._store.path,
                )
