"""WorkoutSession and ExerciseLog schemas, including the offline sync batch."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hypertrophy_tracker.core.constants import (
    MAX_REPS,
    MAX_RPE,
    MAX_SET_NUMBER,
    MAX_SYNC_LOGS,
    MAX_WEIGHT_KG,
    MIN_RPE,
)


class SessionCreate(BaseModel):
    workout_day_id: int
    session_date: datetime
    notes: str | None = None
    duration_seconds: int | None = Field(None, ge=0)
    client_session_key: str | None = Field(
        None, max_length=64, description="Client-generated key; repeats return the same session"
    )


class SessionCreated(BaseModel):
    session_id: int


class SessionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    workout_day_id: int
    session_date: datetime
    notes: str | None = None
    duration_seconds: int | None = None
    created_at: datetime | None = None


class ExerciseLogBase(BaseModel):
    exercise_id: int
    set_number: int = Field(..., ge=1, le=MAX_SET_NUMBER)
    reps: int = Field(..., ge=0, le=MAX_REPS)
    weight: int = Field(..., ge=0, le=MAX_WEIGHT_KG, description="Weight in whole kg")
    rir: int | None = Field(None, ge=0, le=10)
    rpe: int | None = Field(None, ge=MIN_RPE, le=MAX_RPE)
    idempotency_key: str | None = Field(None, max_length=64)


class ExerciseLogCreate(ExerciseLogBase):
    session_id: int


class ExerciseLogged(BaseModel):
    success: bool = True
    log_id: int
    duplicate: bool = False


class ExerciseLogRead(ExerciseLogBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: int
    created_at: datetime | None = None


class PendingLog(ExerciseLogBase):
    """A set recorded while offline. logged_at is the client clock at completion."""

    idempotency_key: str = Field(..., min_length=1, max_length=64)
    logged_at: datetime


class SyncRequest(BaseModel):
    """One offline buffer: a session (maybe not yet created) and its sets, in order."""

    client_session_key: str = Field(..., min_length=1, max_length=64)
    workout_day_id: int
    session_id: int | None = None
    notes: str | None = None
    duration_seconds: int | None = Field(None, ge=0)
    logs: list[PendingLog] = Field(default_factory=list, max_length=MAX_SYNC_LOGS)


class SyncResult(BaseModel):
    session_id: int
    session_created: bool
    logged: int
    duplicates: int
