"""Account registration, login and bearer-token resolution."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from hypertrophy_tracker.core.exceptions import AlreadyExistsError
from hypertrophy_tracker.core.security import generate_token, hash_password, hash_token, verify_password
from hypertrophy_tracker.models.user import AuthToken, User
from hypertrophy_tracker.schemas.auth import UserRegister
from hypertrophy_tracker.services.reminders import seed_default_reminders

logger = logging.getLogger(__name__)


async def get_user_by_open_id(db: AsyncSession, open_id: str) -> User | None:
    result = await db.execute(select(User).where(User.open_id == open_id).limit(1))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, payload: UserRegister) -> User:
    if await get_user_by_open_id(db, payload.open_id) is not None:
        raise AlreadyExistsError("User already exists")
    user = User(
        open_id=payload.open_id,
        name=payload.name,
        email=payload.email,
        login_method="password",
        password_hash=hash_password(payload.password),
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    await seed_default_reminders(db, user.id)
    logger.info("Registered user %s", user.id)
    return user


async def authenticate(db: AsyncSession, open_id: str, password: str) -> User | None:
    user = await get_user_by_open_id(db, open_id)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user


async def issue_token(db: AsyncSession, user: User, ttl_hours: int) -> tuple[str, datetime]:
    """Create a bearer token for ``user`` and stamp last_signed_in. Returns (token, expires_at)."""
    now = datetime.now(timezone.utc)
    token = generate_token()
    expires_at = now + timedelta(hours=ttl_hours)
    db.add(AuthToken(user_id=user.id, token_hash=hash_token(token), expires_at=expires_at))
    user.last_signed_in = now
    await db.flush()
    await db.refresh(user)
    return token, expires_at


async def resolve_token(db: AsyncSession, token: str) -> User | None:
    """User owning an unexpired token, else None."""
    result = await db.execute(
        select(User)
        .join(AuthToken, AuthToken.user_id == User.id)
        .where(
            AuthToken.token_hash == hash_token(token),
            AuthToken.expires_at > datetime.now(timezone.utc),
        )
    )
    return result.scalar_one_or_none()


async def revoke_token(db: AsyncSession, token: str) -> None:
    await db.execute(delete(AuthToken).where(AuthToken.token_hash == hash_token(token)))
