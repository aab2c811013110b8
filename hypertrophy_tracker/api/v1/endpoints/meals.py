"""Meal endpoints: owner-scoped CRUD and the daily macro summary."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.api.deps import get_current_user
from hypertrophy_tracker.core.config import get_settings
from hypertrophy_tracker.core.exceptions import NotFoundError
from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.models.user import User
from hypertrophy_tracker.schemas.meal import MealCreate, MealDaySummary, MealRead
from hypertrophy_tracker.services import meals

router = APIRouter()


@router.post("", response_model=MealRead, status_code=201)
async def create_meal(
    payload: MealCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await meals.create_meal(db, user.id, payload)


@router.get("", response_model=list[MealRead])
async def get_meals(
    day: date = Query(..., alias="date", description="YYYY-MM-DD"),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The caller's meals on ``date``, newest first."""
    return await meals.get_meals_by_date(db, user.id, day)


@router.get("/summary", response_model=MealDaySummary)
async def get_summary(
    day: date = Query(..., alias="date"),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Macro totals for the day and percent of the daily goals."""
    day_meals = await meals.get_meals_by_date(db, user.id, day)
    return meals.summarize_meals(day, day_meals, meals.macro_goals(get_settings()))


@router.delete("/{meal_id}", status_code=204)
async def delete_meal(
    meal_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        await meals.delete_meal(db, user.id, meal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
