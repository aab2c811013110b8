"""Load the static plans into the database. Safe to run repeatedly."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.core.plan_data import HYPERTROPHY_PLAN, VACATION_PLAN
from hypertrophy_tracker.models.plan import Exercise, VacationExercise, VacationWorkoutDay, WorkoutDay

logger = logging.getLogger(__name__)


async def seed_workout_plan(db: AsyncSession) -> int:
    """Insert the 5-day plan unless workout days already exist. Returns days inserted."""
    count = (await db.execute(select(func.count(WorkoutDay.id)))).scalar_one()
    if count:
        logger.info("Workout plan already seeded (%d days)", count)
        return 0

    for day in HYPERTROPHY_PLAN:
        workout_day = WorkoutDay(
            day_number=day["day_number"], day_name=day["day_name"], focus=day["focus"]
        )
        workout_day.exercises = [
            Exercise(
                order_index=i,
                name=name,
                sets=sets,
                reps=reps,
                rir=rir,
                notes=notes,
                is_superset=is_superset,
            )
            for i, (name, sets, reps, rir, notes, is_superset) in enumerate(day["exercises"], start=1)
        ]
        db.add(workout_day)
        logger.info(
            "Day %d: %s (%d exercises)", day["day_number"], day["day_name"], len(day["exercises"])
        )
    await db.flush()
    return len(HYPERTROPHY_PLAN)


async def seed_vacation_plan(db: AsyncSession) -> int:
    count = (await db.execute(select(func.count(VacationWorkoutDay.id)))).scalar_one()
    if count:
        return 0

    for day in VACATION_PLAN:
        vacation_day = VacationWorkoutDay(
            day_number=day["day_number"],
            day_name=day["day_name"],
            focus=day["focus"],
            difficulty=day["difficulty"],
        )
        vacation_day.exercises = [
            VacationExercise(
                order_index=i, name=name, sets=sets, reps=reps, rir=rir, notes="", equipment=equipment
            )
            for i, (name, sets, reps, rir, equipment) in enumerate(day["exercises"], start=1)
        ]
        db.add(vacation_day)
    await db.flush()
    logger.info("Vacation plan seeded (%d days)", len(VACATION_PLAN))
    return len(VACATION_PLAN)
