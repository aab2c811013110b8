"""ProgressLog schemas - body weight, circumferences and photos."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProgressLogCreate(BaseModel):
    log_date: datetime
    body_weight: float = Field(..., gt=20, lt=400, description="Body weight in kg")
    chest: Optional[float] = Field(None, gt=0, lt=300, description="cm")
    waist: Optional[float] = Field(None, gt=0, lt=300)
    hips: Optional[float] = Field(None, gt=0, lt=300)
    arms: Optional[float] = Field(None, gt=0, lt=100)
    thighs: Optional[float] = Field(None, gt=0, lt=150)
    photo_front_url: Optional[str] = Field(None, max_length=500)
    photo_side_url: Optional[str] = Field(None, max_length=500)
    photo_back_url: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class ProgressLogRead(ProgressLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    created_at: datetime
