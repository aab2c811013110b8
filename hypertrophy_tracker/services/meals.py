"""Meal queries and daily macro totals."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.core.config import Settings
from hypertrophy_tracker.core.exceptions import NotFoundError
from hypertrophy_tracker.db.errors import empty_on_unavailable
from hypertrophy_tracker.models.meal import Meal
from hypertrophy_tracker.schemas.meal import MealCreate

logger = logging.getLogger(__name__)

MACROS = ("protein", "carbs", "fats", "calories")


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """[start of day, start of next day) in UTC."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


async def create_meal(db: AsyncSession, user_id: int, payload: MealCreate) -> Meal:
    meal = Meal(user_id=user_id, **payload.model_dump())
    db.add(meal)
    await db.flush()
    await db.refresh(meal)
    return meal


@empty_on_unavailable(list)
async def get_meals_by_date(db: AsyncSession, user_id: int, day: date) -> list[Meal]:
    start, end = day_bounds(day)
    result = await db.execute(
        select(Meal)
        .where(Meal.user_id == user_id, Meal.date >= start, Meal.date < end)
        .order_by(Meal.created_at.desc(), Meal.id.desc())
    )
    return list(result.scalars().all())


async def delete_meal(db: AsyncSession, user_id: int, meal_id: int) -> None:
    """Delete exactly one of the caller's meals."""
    result = await db.execute(select(Meal).where(Meal.id == meal_id, Meal.user_id == user_id))
    meal = result.scalar_one_or_none()
    if meal is None:
        raise NotFoundError("Meal not found")
    await db.delete(meal)
    await db.flush()
    logger.info("Deleted meal %s for user %s", meal_id, user_id)


def macro_goals(settings: Settings) -> dict[str, int]:
    return {
        "protein": settings.macro_goal_protein,
        "carbs": settings.macro_goal_carbs,
        "fats": settings.macro_goal_fats,
        "calories": settings.macro_goal_calories,
    }


def summarize_meals(day: date, meals: Iterable[Meal], goals: dict[str, int]) -> dict:
    meals = list(meals)
    totals = {k: sum(getattr(m, k) for m in meals) for k in MACROS}
    progress = {
        k: round(totals[k] / goals[k] * 100, 1) if goals[k] else 0.0
        for k in MACROS
    }
    return {
        "date": day,
        "meal_count": len(meals),
        "totals": totals,
        "goals": goals,
        "progress": progress,
    }
