"""Auth schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hypertrophy_tracker.core.enums import UserRole


class UserRegister(BaseModel):
    open_id: str = Field(..., min_length=3, max_length=64, description="Login identifier")
    password: str = Field(..., min_length=8, max_length=72)
    name: str | None = None
    email: str | None = Field(None, max_length=320)


class UserLogin(BaseModel):
    open_id: str
    password: str


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    open_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None
    role: UserRole
    created_at: datetime
    last_signed_in: datetime


class TokenRead(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserRead
