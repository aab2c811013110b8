"""Persistent store for sets recorded while the API is unreachable.

One JSON file per client session key under the store directory, so several offline
sessions can wait for sync side by side. Files are replaced atomically (tmp + replace).
"""

from __future__ import annotations

import logging
import os
import re
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from hypertrophy_tracker.schemas.workout import PendingLog, SyncRequest

logger = logging.getLogger(__name__)

BUFFER_SCHEMA_VERSION = 1
_KEY_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class PendingBuffer(BaseModel):
    """On-disk shape of one offline session."""

    version: int = BUFFER_SCHEMA_VERSION
    client_session_key: str
    workout_day_id: int
    session_id: int | None = None
    notes: str | None = None
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    logs: list[PendingLog] = Field(default_factory=list)

    def to_sync_request(self) -> SyncRequest:
        return SyncRequest(
            client_session_key=self.client_session_key,
            workout_day_id=self.workout_day_id,
            session_id=self.session_id,
            notes=self.notes,
            logs=self.logs,
        )


class PendingLogStore:
    def __init__(self, root: str | os.PathLike) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid client session key: {key!r}")
        return self.root / f"{key}.json"

    def _write(self, buffer: PendingBuffer) -> None:
        path = self._path(buffer.client_session_key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(buffer.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp, path)

    def open(
        self,
        key: str,
        workout_day_id: int,
        session_id: int | None = None,
        notes: str | None = None,
        started_at: datetime | None = None,
    ) -> PendingBuffer:
        """Return the buffer for ``key``, creating it if absent. Never overwrites an existing one."""
        existing = self.load(key)
        if existing is not None:
            return existing
        buffer = PendingBuffer(
            client_session_key=key,
            workout_day_id=workout_day_id,
            session_id=session_id,
            notes=notes,
            started_at=started_at or datetime.now(timezone.utc),
        )
        self._write(buffer)
        return buffer

    def load(self, key: str) -> PendingBuffer | None:
        path = self._path(key)
        if not path.exists():
            return None
        buffer = PendingBuffer.model_validate_json(path.read_text(encoding="utf-8"))
        if buffer.version != BUFFER_SCHEMA_VERSION:
            raise ValueError(f"Unsupported pending buffer version {buffer.version} in {path}")
        return buffer

    def append(self, key: str, log: PendingLog) -> PendingBuffer:
        buffer = self.load(key)
        if buffer is None:
            raise KeyError(key)
        buffer.logs.append(log)
        self._write(buffer)
        logger.debug("Buffered set %s for %s (%d pending)", log.set_number, key, len(buffer.logs))
        return buffer

    def pending_keys(self) -> list[str]:
        """Keys of all buffers awaiting sync, oldest session first (by started_at, then key).
        Appending to a buffer does not change its position."""
        buffers = [b for b in (self.load(p.stem) for p in self.root.glob("*.json")) if b is not None]
        buffers.sort(key=lambda b: (b.started_at, b.client_session_key))
        return [b.client_session_key for b in buffers]

    def discard(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
