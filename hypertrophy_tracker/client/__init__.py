"""Python client: REST wrapper, offline pending-log store and session logger."""

from hypertrophy_tracker.client.api import TrackerClient
from hypertrophy_tracker.client.offline import PendingBuffer, PendingLogStore
from hypertrophy_tracker.client.reminders import poll_due_reminders, watch_reminders
from hypertrophy_tracker.client.session_logger import SessionLogger

__all__ = [
    "PendingBuffer",
    "PendingLogStore",
    "SessionLogger",
    "TrackerClient",
    "poll_due_reminders",
    "watch_reminders",
]
