"""Workout plan schemas (read-only)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class WorkoutDayRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    day_number: int
    day_name: str
    focus: str
    created_at: datetime | None = None


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    workout_day_id: int
    order_index: int
    name: str
    sets: int
    reps: str
    rir: str
    notes: str | None = None
    is_superset: bool = False


class VacationDayRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    day_number: int
    day_name: str
    focus: str
    difficulty: str


class VacationExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    vacation_day_id: int
    order_index: int
    name: str
    sets: int
    reps: str
    rir: str
    notes: str | None = None
    equipment: str
