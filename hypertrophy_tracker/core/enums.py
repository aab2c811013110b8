"""Shared enums for models and API."""

from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class MealType(str, Enum):
    """Meal slot in the daily plan. Values are the stored/wire names."""

    BREAKFAST = "desayuno"
    SNACK_1 = "snack1"
    LUNCH = "almuerzo"
    SNACK_2 = "snack2"
    PRE_WORKOUT = "pre_entrenamiento"
    POST_WORKOUT = "post_entrenamiento"
    DINNER = "cena"


class SessionLoggerState(str, Enum):
    """Client-side state of an in-progress workout session."""

    NOT_STARTED = "not_started"
    ACTIVE_ONLINE = "active_online"
    ACTIVE_OFFLINE = "active_offline"
