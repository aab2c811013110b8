"""Meal schemas."""

from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hypertrophy_tracker.core.enums import MealType


class MealCreate(BaseModel):
    date: datetime
    meal_type: MealType
    description: str = Field(..., min_length=1)
    protein: int = Field(0, ge=0)
    carbs: int = Field(0, ge=0)
    fats: int = Field(0, ge=0)
    calories: int = Field(0, ge=0)


class MealRead(MealCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    created_at: datetime | None = None


class MacroTotals(BaseModel):
    protein: int = 0
    carbs: int = 0
    fats: int = 0
    calories: int = 0


class MacroProgress(BaseModel):
    """Percent of the daily goal reached per macro (may exceed 100)."""

    protein: float
    carbs: float
    fats: float
    calories: float


class MealDaySummary(BaseModel):
    date: date_type
    meal_count: int
    totals: MacroTotals
    goals: MacroTotals
    progress: MacroProgress
