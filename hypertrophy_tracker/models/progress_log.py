"""ProgressLog model - body weight + measurement snapshot with optional photos."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hypertrophy_tracker.db.base import Base


class ProgressLog(Base):
    __tablename__ = "progress_logs"
    __table_args__ = (Index("ix_progress_logs_user_date", "user_id", "log_date"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    log_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    body_weight: Mapped[float] = mapped_column(Float, nullable=False)  # kg

    # Circumferences in cm
    chest: Mapped[float | None] = mapped_column(Float, nullable=True)
    waist: Mapped[float | None] = mapped_column(Float, nullable=True)
    hips: Mapped[float | None] = mapped_column(Float, nullable=True)
    arms: Mapped[float | None] = mapped_column(Float, nullable=True)
    thighs: Mapped[float | None] = mapped_column(Float, nullable=True)

    photo_front_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    photo_side_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    photo_back_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
