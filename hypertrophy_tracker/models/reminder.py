"""Supplement reminder model - per-user daily reminder at a fixed HH:MM."""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from hypertrophy_tracker.db.base import Base


class SupplementReminder(Base):
    __tablename__ = "supplement_reminders"
    __table_args__ = (UniqueConstraint("user_id", "slug", name="uq_supplement_reminders_user_slug"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(50), nullable=False)  # "creatine"
    time: Mapped[str] = mapped_column(String(5), nullable=False)  # "07:30", local time of the user
    supplement: Mapped[str] = mapped_column(String(100), nullable=False)
    dose: Mapped[str] = mapped_column(String(200), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
