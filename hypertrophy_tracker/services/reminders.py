"""Supplement reminders: per-user CRUD and the minute-level due check."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.core.exceptions import AlreadyExistsError, NotFoundError
from hypertrophy_tracker.core.plan_data import DEFAULT_REMINDERS
from hypertrophy_tracker.db.errors import empty_on_unavailable
from hypertrophy_tracker.models.reminder import SupplementReminder
from hypertrophy_tracker.schemas.reminder import ReminderCreate, ReminderUpdate


def due_reminders(reminders: Iterable[SupplementReminder], at: str) -> list[SupplementReminder]:
    """Enabled reminders scheduled exactly at ``at`` (HH:MM)."""
    return [r for r in reminders if r.enabled and r.time == at]


async def seed_default_reminders(db: AsyncSession, user_id: int) -> None:
    """Give a new account the default supplement schedule. Called once, at registration;
    a user who later deletes every reminder keeps an empty list."""
    db.add_all(SupplementReminder(user_id=user_id, enabled=True, **d) for d in DEFAULT_REMINDERS)
    await db.flush()


@empty_on_unavailable(list)
async def list_reminders(db: AsyncSession, user_id: int) -> list[SupplementReminder]:
    """The user's reminders by time. Read-only."""
    result = await db.execute(
        select(SupplementReminder)
        .where(SupplementReminder.user_id == user_id)
        .order_by(SupplementReminder.time, SupplementReminder.id)
    )
    return list(result.scalars().all())


async def create_reminder(db: AsyncSession, user_id: int, payload: ReminderCreate) -> SupplementReminder:
    existing = await db.execute(
        select(SupplementReminder.id).where(
            SupplementReminder.user_id == user_id, SupplementReminder.slug == payload.slug
        )
    )
    if existing.scalar_one_or_none() is not None:
        raise AlreadyExistsError(f"Reminder '{payload.slug}' already exists")
    reminder = SupplementReminder(user_id=user_id, **payload.model_dump())
    db.add(reminder)
    await db.flush()
    await db.refresh(reminder)
    return reminder


async def _get_owned(db: AsyncSession, user_id: int, reminder_id: int) -> SupplementReminder:
    result = await db.execute(
        select(SupplementReminder).where(
            SupplementReminder.id == reminder_id, SupplementReminder.user_id == user_id
        )
    )
    reminder = result.scalar_one_or_none()
    if reminder is None:
        raise NotFoundError("Reminder not found")
    return reminder


async def update_reminder(
    db: AsyncSession, user_id: int, reminder_id: int, payload: ReminderUpdate
) -> SupplementReminder:
    reminder = await _get_owned(db, user_id, reminder_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(reminder, k, v)
    await db.flush()
    await db.refresh(reminder)
    return reminder


async def delete_reminder(db: AsyncSession, user_id: int, reminder_id: int) -> None:
    reminder = await _get_owned(db, user_id, reminder_id)
    await db.delete(reminder)
    await db.flush()
