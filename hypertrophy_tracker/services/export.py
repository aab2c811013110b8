"""CSV export of logged sets."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.core.constants import CSV_EXPORT_HEADER, UTF8_BOM
from hypertrophy_tracker.models.plan import Exercise, WorkoutDay
from hypertrophy_tracker.models.workout import ExerciseLog, WorkoutSession


async def fetch_export_rows(db: AsyncSession, user_id: int) -> list[tuple]:
    """One row per logged set, oldest session first, in CSV column order."""
    result = await db.execute(
        select(
            WorkoutSession.session_date,
            WorkoutDay.day_name,
            Exercise.name,
            ExerciseLog.set_number,
            ExerciseLog.reps,
            ExerciseLog.weight,
            ExerciseLog.rir,
            ExerciseLog.rpe,
        )
        .join(WorkoutSession, WorkoutSession.id == ExerciseLog.session_id)
        .join(WorkoutDay, WorkoutDay.id == WorkoutSession.workout_day_id)
        .join(Exercise, Exercise.id == ExerciseLog.exercise_id)
        .where(WorkoutSession.user_id == user_id)
        .order_by(
            WorkoutSession.session_date,
            WorkoutSession.id,
            Exercise.order_index,
            ExerciseLog.set_number,
        )
    )
    return [tuple(row) for row in result.all()]


def build_csv(rows: Iterable[tuple]) -> str:
    """UTF-8 BOM + comma-separated rows so spreadsheet apps detect the encoding."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_EXPORT_HEADER)
    for session_date, day_name, exercise, set_number, reps, weight, rir, rpe in rows:
        writer.writerow(
            [
                session_date.date().isoformat(),
                day_name,
                exercise,
                set_number,
                reps,
                weight,
                "" if rir is None else rir,
                "" if rpe is None else rpe,
            ]
        )
    return UTF8_BOM + output.getvalue()
