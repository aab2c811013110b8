"""ORM models - import all so Base.metadata is complete for migrations."""

from hypertrophy_tracker.models.meal import Meal
from hypertrophy_tracker.models.plan import Exercise, VacationExercise, VacationWorkoutDay, WorkoutDay
from hypertrophy_tracker.models.progress_log import ProgressLog
from hypertrophy_tracker.models.reminder import SupplementReminder
from hypertrophy_tracker.models.user import AuthToken, User
from hypertrophy_tracker.models.workout import ExerciseLog, WorkoutSession

__all__ = [
    "AuthToken",
    "Exercise",
    "ExerciseLog",
    "Meal",
    "ProgressLog",
    "SupplementReminder",
    "User",
    "VacationExercise",
    "VacationWorkoutDay",
    "WorkoutDay",
    "WorkoutSession",
]
