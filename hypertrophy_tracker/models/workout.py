"""WorkoutSession and ExerciseLog models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hypertrophy_tracker.db.base import Base


class WorkoutSession(Base):
    """A performed workout of one plan day. Immutable once created.

    client_session_key is set when the session was started on a client that may have
    been offline; it lets a replayed sync find the session it already created.
    """

    __tablename__ = "workout_sessions"
    __table_args__ = (
        Index("ix_workout_sessions_user_date", "user_id", "session_date"),
        UniqueConstraint("user_id", "client_session_key", name="uq_workout_sessions_user_client_key"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    workout_day_id: Mapped[int] = mapped_column(ForeignKey("workout_days.id"), nullable=False)
    session_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    client_session_key: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    logs: Mapped[list["ExerciseLog"]] = relationship("ExerciseLog", back_populates="session")
    workout_day: Mapped["WorkoutDay"] = relationship("WorkoutDay")


class ExerciseLog(Base):
    """One completed set. Append-only.

    idempotency_key is generated by the client per set; a replayed write with the same
    (session, exercise, set_number, key) is stored once.
    """

    __tablename__ = "exercise_logs"
    __table_args__ = (
        Index("ix_exercise_logs_session_id", "session_id"),
        Index("ix_exercise_logs_exercise_id", "exercise_id"),
        UniqueConstraint(
            "session_id",
            "exercise_id",
            "set_number",
            "idempotency_key",
            name="uq_exercise_logs_idempotency",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    session_id: Mapped[int] = mapped_column(ForeignKey("workout_sessions.id"), nullable=False)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"), nullable=False)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)  # 1, 2, 3...
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[int] = mapped_column(Integer, nullable=False)  # whole kg
    rir: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rpe: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-10
    idempotency_key: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    session: Mapped["WorkoutSession"] = relationship("WorkoutSession", back_populates="logs")
    exercise: Mapped["Exercise"] = relationship("Exercise")
