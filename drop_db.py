import asyncio
import os
import sys

from sqlalchemy import text

# Run from the repository root
sys.path.append(os.getcwd())

import hypertrophy_tracker.models  # noqa: F401 - register all models
from hypertrophy_tracker.db.base import Base
from hypertrophy_tracker.db.session import engine


async def drop_tables():
    print("Dropping all tables...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
