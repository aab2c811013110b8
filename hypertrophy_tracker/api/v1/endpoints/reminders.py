"""Supplement reminder endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.api.deps import get_current_user
from hypertrophy_tracker.core.exceptions import AlreadyExistsError, NotFoundError
from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.models.user import User
from hypertrophy_tracker.schemas.reminder import (
    HHMM_PATTERN,
    ReminderCreate,
    ReminderRead,
    ReminderUpdate,
)
from hypertrophy_tracker.services import reminders

router = APIRouter()


@router.get("", response_model=list[ReminderRead])
async def list_reminders(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The caller's reminders ordered by time."""
    return await reminders.list_reminders(db, user.id)


@router.post("", response_model=ReminderRead, status_code=201)
async def create_reminder(
    payload: ReminderCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await reminders.create_reminder(db, user.id, payload)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/due", response_model=list[ReminderRead])
async def get_due(
    at: str = Query(..., pattern=HHMM_PATTERN, description="HH:MM"),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Enabled reminders scheduled at exactly ``at``."""
    return reminders.due_reminders(await reminders.list_reminders(db, user.id), at)


@router.patch("/{reminder_id}", response_model=ReminderRead)
async def update_reminder(
    reminder_id: int,
    payload: ReminderUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await reminders.update_reminder(db, user.id, reminder_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{reminder_id}", status_code=204)
async def delete_reminder(
    reminder_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        await reminders.delete_reminder(db, user.id, reminder_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
