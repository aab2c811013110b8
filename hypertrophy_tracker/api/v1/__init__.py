"""API v1 router aggregation."""

from fastapi import APIRouter

from hypertrophy_tracker.api.v1.endpoints import (
    auth,
    body,
    health,
    meals,
    progress,
    reminders,
    workout,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(workout.router, prefix="/workout", tags=["workout"])
api_router.include_router(progress.router, prefix="/progress", tags=["progress"])
api_router.include_router(meals.router, prefix="/meals", tags=["meals"])
api_router.include_router(body.router, prefix="/body", tags=["body"])
api_router.include_router(reminders.router, prefix="/reminders", tags=["reminders"])
