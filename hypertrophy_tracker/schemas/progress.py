"""Progress aggregation schemas."""

from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel


class ProgressPoint(BaseModel):
    """Aggregate of one exercise on one calendar date."""

    date: date_type
    max_weight: int
    total_volume: int
    set_count: int


class LastWeight(BaseModel):
    weight: int
    reps: int
    date: datetime


class ExerciseComparison(BaseModel):
    exercise_id: int
    exercise_name: str | None = None
    current_max_weight: int
    previous_max_weight: int
    weight_diff: int
    current_volume: int
    previous_volume: int
    volume_diff: int


class SessionComparison(BaseModel):
    session_id: int
    previous_session_id: int | None = None
    exercises: list[ExerciseComparison] = []
