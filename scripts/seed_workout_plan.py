"""Seed the 5-day hypertrophy plan and the vacation plan. Existing plans are left untouched.

Usage: python scripts/seed_workout_plan.py [--create-tables]
"""

import argparse
import asyncio
import os
import sys

# Add parent directory to path so we can import hypertrophy_tracker
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import hypertrophy_tracker.models  # noqa: F401 - register all models
from hypertrophy_tracker.db.base import Base
from hypertrophy_tracker.db.session import async_session_maker, engine
from hypertrophy_tracker.services.seed import seed_vacation_plan, seed_workout_plan


async def main(create_tables: bool) -> None:
    if create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        days = await seed_workout_plan(session)
        vacation_days = await seed_vacation_plan(session)
        await session.commit()

    print(f"Seeded {days} workout days and {vacation_days} vacation days.")
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--create-tables", action="store_true", help="Run create_all first (dev only)")
    args = parser.parse_args()
    asyncio.run(main(args.create_tables))
