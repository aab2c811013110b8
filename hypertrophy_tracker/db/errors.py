"""Database availability handling for read paths."""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Connection-level failures. Integrity/programming errors are not "unavailable".
UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, OSError)


def empty_on_unavailable(default_factory: Callable[[], T]):
    """Read-query decorator: if the database cannot be reached, log and return
    ``default_factory()`` instead of raising. Writes must not use this."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(db: AsyncSession, *args: Any, **kwargs: Any) -> T:
            try:
                return await func(db, *args, **kwargs)
            except UNAVAILABLE_ERRORS as e:
                logger.exception("%s: database not available: %s", func.__name__, e)
                await db.rollback()
                return default_factory()

        return wrapper

    return decorator
