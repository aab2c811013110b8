"""Minute-level supplement reminder polling."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime

import httpx

from hypertrophy_tracker.client.api import TrackerClient
from hypertrophy_tracker.core.constants import REMINDER_POLL_SECONDS

logger = logging.getLogger(__name__)


def poll_due_reminders(
    client: TrackerClient,
    on_due: Callable[[dict], None],
    now: datetime | None = None,
) -> list[dict]:
    """Fetch the reminders due at the current minute and hand each to ``on_due``."""
    moment = now or datetime.now()
    due = client.get_due_reminders(f"{moment.hour:02d}:{moment.minute:02d}")
    for reminder in due:
        on_due(reminder)
    return due


def watch_reminders(
    client: TrackerClient,
    on_due: Callable[[dict], None],
    interval: float = REMINDER_POLL_SECONDS,
    iterations: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Poll every ``interval`` seconds; forever unless ``iterations`` is given."""
    count = 0
    while iterations is None or count < iterations:
        try:
            poll_due_reminders(client, on_due)
        except (httpx.TransportError, httpx.HTTPStatusError) as e:
            logger.warning("Reminder poll failed: %s", e)
        count += 1
        if iterations is None or count < iterations:
            sleep(interval)
