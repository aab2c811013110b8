"""Body progress endpoints: weight, circumference and photo snapshots."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.api.deps import get_current_user
from hypertrophy_tracker.db.errors import UNAVAILABLE_ERRORS
from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.models.progress_log import ProgressLog
from hypertrophy_tracker.models.user import User
from hypertrophy_tracker.schemas.body import ProgressLogCreate, ProgressLogRead

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/logs", response_model=ProgressLogRead, status_code=201)
async def create_progress_log(
    payload: ProgressLogCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Log body weight with optional circumferences and photo URLs."""
    log = ProgressLog(user_id=user.id, **payload.model_dump())
    db.add(log)
    await db.flush()
    await db.refresh(log)
    return log


@router.get("/logs", response_model=list[ProgressLogRead])
async def list_progress_logs(
    limit: int = Query(50, ge=1, le=500),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Most recent first. Returns an empty list when the database is unreachable."""
    try:
        result = await db.execute(
            select(ProgressLog)
            .where(ProgressLog.user_id == user.id)
            .order_by(ProgressLog.log_date.desc(), ProgressLog.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
    except UNAVAILABLE_ERRORS as e:
        logger.exception("GET /body/logs failed: %s", e)
        await db.rollback()
        return []


@router.delete("/logs/{log_id}", status_code=204)
async def delete_progress_log(
    log_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(ProgressLog).where(ProgressLog.id == log_id, ProgressLog.user_id == user.id)
    )
    log = result.scalar_one_or_none()
    if not log:
        raise HTTPException(status_code=404, detail="Progress log not found")
    await db.delete(log)
    await db.flush()
