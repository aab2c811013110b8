"""Supplement reminder schemas."""

from pydantic import BaseModel, ConfigDict, Field

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ReminderCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-z0-9_-]+$")
    time: str = Field(..., pattern=HHMM_PATTERN, description="HH:MM, 24h")
    supplement: str = Field(..., min_length=1, max_length=100)
    dose: str = Field(..., max_length=200)
    enabled: bool = True


class ReminderUpdate(BaseModel):
    time: str | None = Field(None, pattern=HHMM_PATTERN)
    supplement: str | None = Field(None, min_length=1, max_length=100)
    dose: str | None = Field(None, max_length=200)
    enabled: bool | None = None


class ReminderRead(ReminderCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
