"""Append-only activity log and its per-type running counters."""

from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from usermetrics.db.session import Base
from usermetrics.models.user import utcnow


class UserActivity(Base):
    __tablename__ = "user_activity"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), index=True)
    activity_type: Mapped[str] = mapped_column(String(50))
    activity_timestamp: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True
    )
    details: Mapped[str | None] = mapped_column(Text, nullable=True)


class UserActivitySummary(Base):
    __tablename__ = "user_activity_summary"
    # ON CONFLICT target for the insert-or-increment upsert.
    __table_args__ = (UniqueConstraint("user_id", "activity_type", name="uq_user_activity_summary_user_type"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), index=True)
    activity_type: Mapped[str] = mapped_column(String(50))
    activity_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    last_updated: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )
