"""Progress endpoints: sessions, set logging, offline sync, aggregates and CSV export."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.api.deps import get_current_user
from hypertrophy_tracker.core.constants import DEFAULT_SESSION_LIST_LIMIT, MAX_SESSION_LIST_LIMIT
from hypertrophy_tracker.core.exceptions import NotFoundError
from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.models.user import User
from hypertrophy_tracker.schemas.progress import LastWeight, ProgressPoint, SessionComparison
from hypertrophy_tracker.schemas.workout import (
    ExerciseLogCreate,
    ExerciseLogged,
    ExerciseLogRead,
    SessionCreate,
    SessionCreated,
    SessionRead,
    SyncRequest,
    SyncResult,
)
from hypertrophy_tracker.services import progress
from hypertrophy_tracker.services.export import build_csv, fetch_export_rows

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/sessions", response_model=SessionCreated, status_code=201)
async def create_session(
    payload: SessionCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        session, _ = await progress.create_workout_session(db, user.id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionCreated(session_id=session.id)


@router.get("/sessions", response_model=list[SessionRead])
async def list_sessions(
    limit: int = Query(DEFAULT_SESSION_LIST_LIMIT, ge=1, le=MAX_SESSION_LIST_LIMIT),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The caller's most recent sessions, newest first."""
    return await progress.get_user_sessions(db, user.id, limit)


@router.get("/sessions/{session_id}/logs", response_model=list[ExerciseLogRead])
async def get_session_logs(
    session_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await progress.get_session_logs(db, user.id, session_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/sessions/{session_id}/comparison", response_model=SessionComparison)
async def compare_session(
    session_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Per exercise: this session's max weight and volume against the previous session of the same day."""
    try:
        return await progress.compare_session(db, user.id, session_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/logs", response_model=ExerciseLogged)
async def log_exercise(
    payload: ExerciseLogCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Append one set. Resending a set with the same idempotency_key returns the stored row."""
    try:
        log, duplicate = await progress.log_exercise(db, user.id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ExerciseLogged(log_id=log.id, duplicate=duplicate)


@router.post("/sync", response_model=SyncResult)
async def sync_pending(
    payload: SyncRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Reconcile one offline buffer in a single transaction."""
    try:
        return await progress.sync_pending(db, user.id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/exercises/{exercise_id}", response_model=list[ProgressPoint])
async def get_exercise_progress(
    exercise_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await progress.get_exercise_progress(db, user.id, exercise_id)


@router.get("/last-weights", response_model=dict[int, LastWeight])
async def get_last_weights(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """exercise_id -> most recent weight/reps/date."""
    return await progress.get_last_weights_by_user(db, user.id)


@router.get("/export.csv")
async def export_csv(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    rows = await fetch_export_rows(db, user.id)
    filename = f"workout-history-{date.today().isoformat()}.csv"
    logger.info("Exporting %d sets for user %s", len(rows), user.id)
    return Response(
        content=build_csv(rows).encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
