"""Client-side workout session: logs sets online, falls back to the offline store
on network failure and reconciles buffers when the API is reachable again."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

import httpx

from hypertrophy_tracker.client.api import TrackerClient
from hypertrophy_tracker.client.offline import PendingLogStore
from hypertrophy_tracker.core.enums import SessionLoggerState
from hypertrophy_tracker.schemas.workout import PendingLog

logger = logging.getLogger(__name__)


def new_key() -> str:
    return uuid.uuid4().hex


class SessionLogger:
    """State machine for one session at a time.

    NOT_STARTED -> ACTIVE_ONLINE | ACTIVE_OFFLINE (depending on whether the session
    could be created), ACTIVE_ONLINE -> ACTIVE_OFFLINE on a transport error,
    ACTIVE_OFFLINE -> ACTIVE_ONLINE after a successful ``sync``.
    """

    def __init__(self, client: TrackerClient, store: PendingLogStore) -> None:
        self.client = client
        self.store = store
        self.state = SessionLoggerState.NOT_STARTED
        self.session_key: str | None = None
        self.session_id: int | None = None
        self.workout_day_id: int | None = None

    def start(self, workout_day_id: int, notes: str | None = None) -> SessionLoggerState:
        self.session_key = new_key()
        self.session_id = None
        self.workout_day_id = workout_day_id
        try:
            self.session_id = self.client.create_session(
                workout_day_id,
                datetime.now(timezone.utc),
                notes=notes,
                client_session_key=self.session_key,
            )
            self.state = SessionLoggerState.ACTIVE_ONLINE
        except httpx.TransportError as e:
            logger.warning("Could not create session online, buffering offline: %s", e)
            self.store.open(self.session_key, workout_day_id, notes=notes)
            self.state = SessionLoggerState.ACTIVE_OFFLINE
        return self.state

    def _go_offline(self) -> None:
        self.store.open(self.session_key, self.workout_day_id, session_id=self.session_id)
        self.state = SessionLoggerState.ACTIVE_OFFLINE

    def log_set(
        self,
        exercise_id: int,
        set_number: int,
        reps: int,
        weight: int,
        rir: int | None = None,
        rpe: int | None = None,
    ) -> bool:
        """Record one set. Returns True when it reached the server, False when buffered."""
        if self.state is SessionLoggerState.NOT_STARTED:
            raise RuntimeError("No active session; call start() first")

        entry = PendingLog(
            exercise_id=exercise_id,
            set_number=set_number,
            reps=reps,
            weight=weight,
            rir=rir,
            rpe=rpe,
            idempotency_key=new_key(),
            logged_at=datetime.now(timezone.utc),
        )
        if self.state is SessionLoggerState.ACTIVE_ONLINE:
            try:
                self.client.log_exercise(
                    self.session_id,
                    **entry.model_dump(mode="json", exclude={"logged_at"}),
                )
                return True
            except httpx.TransportError as e:
                logger.warning("Network lost while logging set, switching to offline: %s", e)
                self._go_offline()

        self.store.append(self.session_key, entry)
        return False

    def sync(self) -> dict[str, dict]:
        """Push every pending buffer. A buffer is discarded only after its sync call
        succeeds; failures stay pending for the next call. Returns results by key."""
        results: dict[str, dict] = {}
        for key in self.store.pending_keys():
            buffer = self.store.load(key)
            if buffer is None:
                continue
            try:
                result = self.client.sync_pending(buffer.to_sync_request().model_dump(mode="json"))
            except (httpx.TransportError, httpx.HTTPStatusError) as e:
                logger.warning("Sync of buffer %s failed, keeping it: %s", key, e)
                continue
            self.store.discard(key)
            results[key] = result
            if key == self.session_key:
                self.session_id = result["session_id"]
                self.state = SessionLoggerState.ACTIVE_ONLINE
        return results

    def finish(self) -> None:
        self.state = SessionLoggerState.NOT_STARTED
        self.session_key = None
        self.session_id = None
        self.workout_day_id = None
