"""Shared router dependencies: authenticated user resolution."""

from __future__ import annotations

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.models.user import User
from hypertrophy_tracker.services.auth import resolve_token

bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHED_MESSAGE = "Please login (10001)"


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Gate for protected procedures: rejects before any business logic runs."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHED_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = await resolve_token(db, credentials.credentials)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHED_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
