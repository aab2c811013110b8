"""Initial schema: users, plans, sessions, set logs, meals, progress logs, reminders.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum("USER", "ADMIN", name="userrole")
meal_type = sa.Enum(
    "desayuno",
    "snack1",
    "almuerzo",
    "snack2",
    "pre_entrenamiento",
    "post_entrenamiento",
    "cena",
    name="mealtype",
)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("open_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("login_method", sa.String(length=64), nullable=True),
        sa.Column("role", user_role, nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_signed_in", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("open_id", name="uq_users_open_id"),
    )

    op.create_table(
        "auth_tokens",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_auth_tokens_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_auth_tokens"),
        sa.UniqueConstraint("token_hash", name="uq_auth_tokens_token_hash"),
    )
    op.create_index("ix_auth_tokens_user_id", "auth_tokens", ["user_id"], unique=False)

    op.create_table(
        "workout_days",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False),
        sa.Column("day_name", sa.String(length=100), nullable=False),
        sa.Column("focus", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_workout_days"),
    )

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workout_day_id", sa.Integer(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("reps", sa.String(length=50), nullable=False),
        sa.Column("rir", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_superset", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["workout_day_id"], ["workout_days.id"], name="fk_exercises_workout_day_id_workout_days"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_exercises"),
    )
    op.create_index(
        "ix_exercises_workout_day_order", "exercises", ["workout_day_id", "order_index"], unique=False
    )

    op.create_table(
        "vacation_workout_days",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False),
        sa.Column("day_name", sa.String(length=100), nullable=False),
        sa.Column("focus", sa.Text(), nullable=False),
        sa.Column("difficulty", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_vacation_workout_days"),
    )

    op.create_table(
        "vacation_exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("vacation_day_id", sa.Integer(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("reps", sa.String(length=50), nullable=False),
        sa.Column("rir", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("equipment", sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(
            ["vacation_day_id"],
            ["vacation_workout_days.id"],
            name="fk_vacation_exercises_vacation_day_id_vacation_workout_days",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_vacation_exercises"),
    )

    op.create_table(
        "workout_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("workout_day_id", sa.Integer(), nullable=False),
        sa.Column("session_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("duration_seconds", sa.Integer(), nullable=True),
        sa.Column("client_session_key", sa.String(length=64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_workout_sessions_user_id_users", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["workout_day_id"],
            ["workout_days.id"],
            name="fk_workout_sessions_workout_day_id_workout_days",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_workout_sessions"),
        sa.UniqueConstraint(
            "user_id", "client_session_key", name="uq_workout_sessions_user_client_key"
        ),
    )
    op.create_index(
        "ix_workout_sessions_user_date", "workout_sessions", ["user_id", "session_date"], unique=False
    )

    op.create_table(
        "exercise_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("session_id", sa.Integer(), nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=False),
        sa.Column("rir", sa.Integer(), nullable=True),
        sa.Column("rpe", sa.Integer(), nullable=True),
        sa.Column("idempotency_key", sa.String(length=64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["session_id"], ["workout_sessions.id"], name="fk_exercise_logs_session_id_workout_sessions"
        ),
        sa.ForeignKeyConstraint(
            ["exercise_id"], ["exercises.id"], name="fk_exercise_logs_exercise_id_exercises"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_exercise_logs"),
        sa.UniqueConstraint(
            "session_id",
            "exercise_id",
            "set_number",
            "idempotency_key",
            name="uq_exercise_logs_idempotency",
        ),
    )
    op.create_index("ix_exercise_logs_session_id", "exercise_logs", ["session_id"], unique=False)
    op.create_index("ix_exercise_logs_exercise_id", "exercise_logs", ["exercise_id"], unique=False)

    op.create_table(
        "meals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("meal_type", meal_type, nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("protein", sa.Integer(), nullable=False),
        sa.Column("carbs", sa.Integer(), nullable=False),
        sa.Column("fats", sa.Integer(), nullable=False),
        sa.Column("calories", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_meals_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_meals"),
    )
    op.create_index("ix_meals_user_date", "meals", ["user_id", "date"], unique=False)

    op.create_table(
        "progress_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("log_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("body_weight", sa.Float(), nullable=False),
        sa.Column("chest", sa.Float(), nullable=True),
        sa.Column("waist", sa.Float(), nullable=True),
        sa.Column("hips", sa.Float(), nullable=True),
        sa.Column("arms", sa.Float(), nullable=True),
        sa.Column("thighs", sa.Float(), nullable=True),
        sa.Column("photo_front_url", sa.String(length=500), nullable=True),
        sa.Column("photo_side_url", sa.String(length=500), nullable=True),
        sa.Column("photo_back_url", sa.String(length=500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_progress_logs_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_progress_logs"),
    )
    op.create_index("ix_progress_logs_user_date", "progress_logs", ["user_id", "log_date"], unique=False)

    op.create_table(
        "supplement_reminders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(length=50), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.Column("supplement", sa.String(length=100), nullable=False),
        sa.Column("dose", sa.String(length=200), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_supplement_reminders_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_supplement_reminders"),
        sa.UniqueConstraint("user_id", "slug", name="uq_supplement_reminders_user_slug"),
    )
    op.create_index(
        "ix_supplement_reminders_user_id", "supplement_reminders", ["user_id"], unique=False
    )


def downgrade() -> None:
    op.drop_table("supplement_reminders")
    op.drop_table("progress_logs")
    op.drop_table("meals")
    op.drop_table("exercise_logs")
    op.drop_table("workout_sessions")
    op.drop_table("vacation_exercises")
    op.drop_table("vacation_workout_days")
    op.drop_table("exercises")
    op.drop_table("workout_days")
    op.drop_table("auth_tokens")
    op.drop_table("users")
    meal_type.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
