"""Workout plan endpoints (public, read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.schemas.plan import (
    ExerciseRead,
    VacationDayRead,
    VacationExerciseRead,
    WorkoutDayRead,
)
from hypertrophy_tracker.services import plan

router = APIRouter()


@router.get("/days", response_model=list[WorkoutDayRead])
async def get_days(db: AsyncSession = Depends(get_db)):
    """All plan days ordered by day number."""
    return await plan.get_all_workout_days(db)


@router.get("/days/{day_id}/exercises", response_model=list[ExerciseRead])
async def get_exercises(day_id: int, db: AsyncSession = Depends(get_db)):
    """Exercises of one day in plan order. Unknown day gives an empty list."""
    return await plan.get_exercises_by_day_id(db, day_id)


@router.get("/vacation/days", response_model=list[VacationDayRead])
async def get_vacation_days(db: AsyncSession = Depends(get_db)):
    return await plan.get_vacation_days(db)


@router.get("/vacation/days/{day_id}/exercises", response_model=list[VacationExerciseRead])
async def get_vacation_exercises(day_id: int, db: AsyncSession = Depends(get_db)):
    return await plan.get_vacation_exercises(db, day_id)
