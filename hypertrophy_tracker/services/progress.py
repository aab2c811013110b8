"""Progress tracking: sessions, set logging (idempotent), offline sync reconciliation,
and the read-side aggregates built on ``progress_aggregation``."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.core.constants import DEFAULT_SESSION_LIST_LIMIT
from hypertrophy_tracker.core.exceptions import NotFoundError
from hypertrophy_tracker.db.errors import empty_on_unavailable
from hypertrophy_tracker.models.plan import Exercise, WorkoutDay
from hypertrophy_tracker.models.workout import ExerciseLog, WorkoutSession
from hypertrophy_tracker.schemas.workout import (
    ExerciseLogBase,
    ExerciseLogCreate,
    SessionCreate,
    SyncRequest,
)
from hypertrophy_tracker.services.progress_aggregation import (
    SetRow,
    aggregate_progress,
    compare_logs,
    pick_last_weights,
)

logger = logging.getLogger(__name__)


# ── Sessions ─────────────────────────────────────────────────────────────

async def _get_owned_session(db: AsyncSession, user_id: int, session_id: int) -> WorkoutSession:
    result = await db.execute(
        select(WorkoutSession).where(
            WorkoutSession.id == session_id, WorkoutSession.user_id == user_id
        )
    )
    session = result.scalar_one_or_none()
    if session is None:
        raise NotFoundError("Workout session not found")
    return session


async def _find_by_client_key(db: AsyncSession, user_id: int, key: str) -> WorkoutSession | None:
    result = await db.execute(
        select(WorkoutSession).where(
            WorkoutSession.user_id == user_id, WorkoutSession.client_session_key == key
        )
    )
    return result.scalar_one_or_none()


async def create_workout_session(
    db: AsyncSession,
    user_id: int,
    payload: SessionCreate,
) -> tuple[WorkoutSession, bool]:
    """
    Insert a session for the user. Returns (session, created).
    A repeated client_session_key returns the session created the first time.
    """
    if payload.client_session_key:
        existing = await _find_by_client_key(db, user_id, payload.client_session_key)
        if existing is not None:
            return existing, False

    if await db.get(WorkoutDay, payload.workout_day_id) is None:
        raise NotFoundError("Workout day not found")

    session = WorkoutSession(user_id=user_id, **payload.model_dump())
    db.add(session)
    await db.flush()
    await db.refresh(session)
    logger.info("Created workout session %s for user %s", session.id, user_id)
    return session, True


@empty_on_unavailable(list)
async def get_user_sessions(
    db: AsyncSession,
    user_id: int,
    limit: int = DEFAULT_SESSION_LIST_LIMIT,
) -> list[WorkoutSession]:
    """Most recent sessions first."""
    result = await db.execute(
        select(WorkoutSession)
        .where(WorkoutSession.user_id == user_id)
        .order_by(WorkoutSession.session_date.desc(), WorkoutSession.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


@empty_on_unavailable(list)
async def get_session_logs(db: AsyncSession, user_id: int, session_id: int) -> list[ExerciseLog]:
    await _get_owned_session(db, user_id, session_id)
    result = await db.execute(
        select(ExerciseLog)
        .where(ExerciseLog.session_id == session_id)
        .order_by(ExerciseLog.exercise_id, ExerciseLog.set_number, ExerciseLog.id)
    )
    return list(result.scalars().all())


# ── Set logging ──────────────────────────────────────────────────────────

async def _insert_log(
    db: AsyncSession,
    session_id: int,
    entry: ExerciseLogBase,
) -> tuple[ExerciseLog, bool]:
    """Insert one set, or return the stored one when its idempotency key was seen."""
    if entry.idempotency_key:
        result = await db.execute(
            select(ExerciseLog).where(
                ExerciseLog.session_id == session_id,
                ExerciseLog.exercise_id == entry.exercise_id,
                ExerciseLog.set_number == entry.set_number,
                ExerciseLog.idempotency_key == entry.idempotency_key,
            )
        )
        existing = result.scalar_one_or_none()
        if existing is not None:
            return existing, True

    log = ExerciseLog(
        session_id=session_id,
        **entry.model_dump(include=set(ExerciseLogBase.model_fields)),
    )
    db.add(log)
    await db.flush()
    return log, False


async def log_exercise(
    db: AsyncSession,
    user_id: int,
    payload: ExerciseLogCreate,
) -> tuple[ExerciseLog, bool]:
    """Append one set to the caller's session. Returns (log, duplicate)."""
    await _get_owned_session(db, user_id, payload.session_id)
    if await db.get(Exercise, payload.exercise_id) is None:
        raise NotFoundError("Exercise not found")
    log, duplicate = await _insert_log(db, payload.session_id, payload)
    if duplicate:
        logger.info(
            "Ignored replayed set (session=%s exercise=%s set=%s)",
            payload.session_id,
            payload.exercise_id,
            payload.set_number,
        )
    return log, duplicate


async def sync_pending(db: AsyncSession, user_id: int, request: SyncRequest) -> dict:
    """
    Reconcile one offline buffer. Without a known session id the session is found by
    client_session_key or created, dated at the first buffered set. Sets are then
    inserted in order; sets already stored (same idempotency key) are counted as
    duplicates. Runs inside the request transaction, so it applies fully or not at all.
    """
    session_created = False
    if request.session_id is not None:
        session = await _get_owned_session(db, user_id, request.session_id)
    else:
        session_date = request.logs[0].logged_at if request.logs else datetime.now(timezone.utc)
        session, session_created = await create_workout_session(
            db,
            user_id,
            SessionCreate(
                workout_day_id=request.workout_day_id,
                session_date=session_date,
                notes=request.notes,
                duration_seconds=request.duration_seconds,
                client_session_key=request.client_session_key,
            ),
        )

    exercise_ids = {entry.exercise_id for entry in request.logs}
    if exercise_ids:
        result = await db.execute(select(Exercise.id).where(Exercise.id.in_(exercise_ids)))
        missing = exercise_ids - set(result.scalars().all())
        if missing:
            raise NotFoundError(f"Exercise not found: {sorted(missing)}")

    logged = duplicates = 0
    for entry in request.logs:
        _, duplicate = await _insert_log(db, session.id, entry)
        if duplicate:
            duplicates += 1
        else:
            logged += 1

    logger.info(
        "Synced buffer %s into session %s: %d new, %d duplicate",
        request.client_session_key,
        session.id,
        logged,
        duplicates,
    )
    return {
        "session_id": session.id,
        "session_created": session_created,
        "logged": logged,
        "duplicates": duplicates,
    }


# ── Aggregates ───────────────────────────────────────────────────────────

async def _fetch_set_rows(
    db: AsyncSession,
    user_id: int,
    exercise_id: int | None = None,
) -> list[SetRow]:
    stmt = (
        select(
            ExerciseLog.id,
            ExerciseLog.session_id,
            WorkoutSession.session_date,
            ExerciseLog.exercise_id,
            ExerciseLog.set_number,
            ExerciseLog.reps,
            ExerciseLog.weight,
        )
        .join(WorkoutSession, WorkoutSession.id == ExerciseLog.session_id)
        .where(WorkoutSession.user_id == user_id)
    )
    if exercise_id is not None:
        stmt = stmt.where(ExerciseLog.exercise_id == exercise_id)
    result = await db.execute(stmt)
    return [SetRow(*row) for row in result.all()]


@empty_on_unavailable(list)
async def get_exercise_progress(db: AsyncSession, user_id: int, exercise_id: int) -> list[dict]:
    """Per-date max weight / total volume / set count for one exercise, oldest first."""
    return aggregate_progress(await _fetch_set_rows(db, user_id, exercise_id))


@empty_on_unavailable(dict)
async def get_last_weights_by_user(db: AsyncSession, user_id: int) -> dict[int, dict]:
    """exercise_id -> weight/reps/date of the most recent set, used to pre-fill the log form."""
    return pick_last_weights(await _fetch_set_rows(db, user_id))


async def get_previous_session(db: AsyncSession, current: WorkoutSession) -> WorkoutSession | None:
    """The user's last session of the same plan day before ``current``."""
    result = await db.execute(
        select(WorkoutSession)
        .where(
            WorkoutSession.user_id == current.user_id,
            WorkoutSession.workout_day_id == current.workout_day_id,
            WorkoutSession.id != current.id,
            or_(
                WorkoutSession.session_date < current.session_date,
                and_(
                    WorkoutSession.session_date == current.session_date,
                    WorkoutSession.id < current.id,
                ),
            ),
        )
        .order_by(WorkoutSession.session_date.desc(), WorkoutSession.id.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def compare_session(db: AsyncSession, user_id: int, session_id: int) -> dict:
    current = await _get_owned_session(db, user_id, session_id)
    previous = await get_previous_session(db, current)

    session_ids = [current.id] + ([previous.id] if previous else [])
    result = await db.execute(
        select(ExerciseLog.session_id, ExerciseLog.exercise_id, ExerciseLog.weight, ExerciseLog.reps)
        .where(ExerciseLog.session_id.in_(session_ids))
    )
    current_logs, previous_logs = [], []
    for sid, exercise_id, weight, reps in result.all():
        (current_logs if sid == current.id else previous_logs).append((exercise_id, weight, reps))

    names: dict[int, str] = {}
    exercise_ids = {ex_id for ex_id, _, _ in current_logs}
    if exercise_ids:
        name_rows = await db.execute(
            select(Exercise.id, Exercise.name).where(Exercise.id.in_(exercise_ids))
        )
        names = {ex_id: name for ex_id, name in name_rows.all()}

    return {
        "session_id": current.id,
        "previous_session_id": previous.id if previous else None,
        "exercises": compare_logs(current_logs, previous_logs, names),
    }
