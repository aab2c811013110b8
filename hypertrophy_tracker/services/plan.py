"""Workout plan queries (static seed data)."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.db.errors import empty_on_unavailable
from hypertrophy_tracker.models.plan import Exercise, VacationExercise, VacationWorkoutDay, WorkoutDay


@empty_on_unavailable(list)
async def get_all_workout_days(db: AsyncSession) -> list[WorkoutDay]:
    result = await db.execute(select(WorkoutDay).order_by(WorkoutDay.day_number))
    return list(result.scalars().all())


@empty_on_unavailable(list)
async def get_exercises_by_day_id(db: AsyncSession, day_id: int) -> list[Exercise]:
    result = await db.execute(
        select(Exercise).where(Exercise.workout_day_id == day_id).order_by(Exercise.order_index)
    )
    return list(result.scalars().all())


@empty_on_unavailable(list)
async def get_vacation_days(db: AsyncSession) -> list[VacationWorkoutDay]:
    result = await db.execute(select(VacationWorkoutDay).order_by(VacationWorkoutDay.day_number))
    return list(result.scalars().all())


@empty_on_unavailable(list)
async def get_vacation_exercises(db: AsyncSession, day_id: int) -> list[VacationExercise]:
    result = await db.execute(
        select(VacationExercise)
        .where(VacationExercise.vacation_day_id == day_id)
        .order_by(VacationExercise.order_index)
    )
    return list(result.scalars().all())
