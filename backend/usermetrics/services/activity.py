"""Activity accounting: the append-only log plus its per-(user, type) counters."""

from __future__ import annotations

import datetime as dt
import logging
import uuid
from dataclasses import dataclass

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from usermetrics.core.config import settings
from usermetrics.core.errors import InternalError, persistence_errors
from usermetrics.models.activity import UserActivity, UserActivitySummary
from usermetrics.models.user import User, as_utc, utcnow
from usermetrics.services.users import get_active_user

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE.
_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


@dataclass(frozen=True)
class SummaryRow:
    activity_type: str
    activity_count: int
    last_updated: dt.datetime


@dataclass(frozen=True)
class ActivityReport:
    """Everything the activity view and the PDF report show for one user."""

    user: User
    recent_activities: list[UserActivity]
    summary: list[SummaryRow]
    window_start: dt.datetime
    generated_at: dt.datetime


def activity_window_start(now: dt.datetime | None = None) -> dt.datetime:
    now = now or utcnow()
    return now - dt.timedelta(days=settings.activity_window_days)


def _upsert_insert(db: Session):
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        logger.error("No ON CONFLICT upsert for dialect %r; activity not recorded", dialect)
        raise InternalError()
    return insert


def _upsert_summary(db: Session, insert, *, user_id: uuid.UUID, activity_type: str, now: dt.datetime) -> None:
    stmt = insert(UserActivitySummary).values(
        user_id=user_id,
        activity_type=activity_type,
        activity_count=1,
        last_updated=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[UserActivitySummary.user_id, UserActivitySummary.activity_type],
        set_={
            "activity_count": UserActivitySummary.activity_count + 1,
            "last_updated": now,
        },
    )
    db.execute(stmt)


def record_activity(db: Session, user_id: uuid.UUID, activity_type: str, details: str | None = None) -> UserActivity:
    """
    Append one activity and bump its counter in the same transaction.
    - Soft-deleted or unknown users -> NotFoundError.
    - Any database failure rolls back both writes -> InternalError.
    - A dialect without ON CONFLICT upserts -> InternalError before anything is written.
    """
    get_active_user(db, user_id)
    insert = _upsert_insert(db)
    now = utcnow()
    entry = UserActivity(user_id=user_id, activity_type=activity_type, activity_timestamp=now, details=details)
    with persistence_errors(db, f"recording {activity_type!r} activity"):
        db.add(entry)
        db.flush()
        _upsert_summary(db, insert, user_id=user_id, activity_type=activity_type, now=now)
        db.commit()
    return entry


def recent_activities(db: Session, user_id: uuid.UUID, *, since: dt.datetime) -> list[UserActivity]:
    return (
        db.query(UserActivity)
        .filter(UserActivity.user_id == user_id, UserActivity.activity_timestamp >= since)
        .order_by(UserActivity.activity_timestamp.desc(), UserActivity.id.desc())
        .limit(settings.recent_activity_limit)
        .all()
    )


def activity_summary(db: Session, user_id: uuid.UUID, *, since: dt.datetime) -> list[SummaryRow]:
    # Grouped even though (user_id, activity_type) is unique; the result shape does not depend on it.
    rows = (
        db.query(
            UserActivitySummary.activity_type,
            func.sum(UserActivitySummary.activity_count).label("activity_count"),
            func.max(UserActivitySummary.last_updated).label("last_updated"),
        )
        .filter(UserActivitySummary.user_id == user_id, UserActivitySummary.last_updated >= since)
        .group_by(UserActivitySummary.activity_type)
        .order_by(UserActivitySummary.activity_type)
        .all()
    )
    return [
        SummaryRow(activity_type=r.activity_type, activity_count=int(r.activity_count), last_updated=as_utc(r.last_updated))
        for r in rows
    ]


def load_activity_report(db: Session, user_id: uuid.UUID) -> ActivityReport:
    user = get_active_user(db, user_id)
    now = utcnow()
    since = activity_window_start(now)
    with persistence_errors(db, "loading activity"):
        recent = recent_activities(db, user_id, since=since)
        summary = activity_summary(db, user_id, since=since)
    return ActivityReport(user=user, recent_activities=recent, summary=summary, window_start=since, generated_at=now)
