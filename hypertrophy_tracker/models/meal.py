"""Meal model - one logged meal with macros."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from hypertrophy_tracker.core.enums import MealType
from hypertrophy_tracker.db.base import Base


class Meal(Base):
    __tablename__ = "meals"
    __table_args__ = (Index("ix_meals_user_date", "user_id", "date"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    meal_type: Mapped[MealType] = mapped_column(
        Enum(MealType, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    protein: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # grams
    carbs: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    fats: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    calories: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
