"""Account endpoints: register, login, current user, logout."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.api.deps import bearer_scheme, get_current_user
from hypertrophy_tracker.core.config import get_settings
from hypertrophy_tracker.core.exceptions import AlreadyExistsError
from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.models.user import User
from hypertrophy_tracker.schemas.auth import TokenRead, UserLogin, UserRead, UserRegister
from hypertrophy_tracker.services import auth

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=TokenRead, status_code=201)
async def register(payload: UserRegister, db: AsyncSession = Depends(get_db)):
    try:
        user = await auth.register_user(db, payload)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))
    token, expires_at = await auth.issue_token(db, user, get_settings().auth_token_ttl_hours)
    return TokenRead(access_token=token, expires_at=expires_at, user=UserRead.model_validate(user))


@router.post("/login", response_model=TokenRead)
async def login(payload: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await auth.authenticate(db, payload.open_id, payload.password)
    if user is None:
        logger.info("Failed login for %s", payload.open_id)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token, expires_at = await auth.issue_token(db, user, get_settings().auth_token_ttl_hours)
    return TokenRead(access_token=token, expires_at=expires_at, user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead)
async def me(user: User = Depends(get_current_user)):
    return user


@router.post("/logout", status_code=204)
async def logout(
    user: User = Depends(get_current_user),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
):
    """Revoke the token used for this request."""
    await auth.revoke_token(db, credentials.credentials)
    logger.info("User %s logged out", user.id)
