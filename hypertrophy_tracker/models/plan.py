"""Workout plan models: the fixed 5-day plan and the vacation plan. Seeded, read-only."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hypertrophy_tracker.db.base import Base


class WorkoutDay(Base):
    """One day of the plan (day_number 1-5)."""

    __tablename__ = "workout_days"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    day_name: Mapped[str] = mapped_column(String(100), nullable=False)  # e.g. "Push (Pectoral y HSPU)"
    focus: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="workout_day", order_by="Exercise.order_index"
    )


class Exercise(Base):
    """Prescribed exercise within a day: target sets, rep range and RIR."""

    __tablename__ = "exercises"
    __table_args__ = (Index("ix_exercises_workout_day_order", "workout_day_id", "order_index"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    workout_day_id: Mapped[int] = mapped_column(ForeignKey("workout_days.id"), nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[str] = mapped_column(String(50), nullable=False)  # "6-8", "5-10 seg"
    rir: Mapped[str] = mapped_column(String(20), nullable=False)  # "1-2"
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_superset: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    workout_day: Mapped["WorkoutDay"] = relationship("WorkoutDay", back_populates="exercises")


class VacationWorkoutDay(Base):
    """Day of the bodyweight plan used away from the gym."""

    __tablename__ = "vacation_workout_days"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    day_name: Mapped[str] = mapped_column(String(100), nullable=False)
    focus: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False)  # fácil / moderado / difícil

    exercises: Mapped[list["VacationExercise"]] = relationship(
        "VacationExercise", back_populates="vacation_day", order_by="VacationExercise.order_index"
    )


class VacationExercise(Base):
    __tablename__ = "vacation_exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    vacation_day_id: Mapped[int] = mapped_column(ForeignKey("vacation_workout_days.id"), nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[str] = mapped_column(String(50), nullable=False)
    rir: Mapped[str] = mapped_column(String(20), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    equipment: Mapped[str] = mapped_column(String(100), nullable=False)

    vacation_day: Mapped["VacationWorkoutDay"] = relationship(
        "VacationWorkoutDay", back_populates="exercises"
    )
