import asyncio
import os
import sys

from sqlalchemy import text

# Run from the repository root
sys.path.append(os.getcwd())

from hypertrophy_tracker.db.session import async_session_maker, engine

TABLES = [
    "users",
    "workout_days",
    "exercises",
    "vacation_workout_days",
    "vacation_exercises",
    "workout_sessions",
    "exercise_logs",
    "meals",
    "progress_logs",
    "supplement_reminders",
]


async def check_data():
    async with async_session_maker() as session:
        print(f"Checking tables: {TABLES}")
        for table in TABLES:
            result = await session.execute(text(f"SELECT count(*) FROM {table}"))
            count = result.scalar()
            print(f"Table '{table}' row count: {count}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
