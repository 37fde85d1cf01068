from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from usermetrics.core.errors import persistence_errors
from usermetrics.models.activity import UserActivitySummary
from usermetrics.models.enums import ActivityType, UserRole
from usermetrics.services.activity import activity_window_start
from usermetrics.services.users import list_users

TOP_USERS_LIMIT = 5


def dashboard_stats(db: Session) -> dict:
    """
    Role counts over active users, plus the most active users in the activity window
    (logins + report downloads, users with no activity left out).
    """
    users = list_users(db)
    admin_count = sum(1 for u in users if u.role == UserRole.ADMIN)

    counts: dict = {}
    if users:
        with persistence_errors(db, "loading dashboard activity"):
            rows = (
                db.query(
                    UserActivitySummary.user_id,
                    UserActivitySummary.activity_type,
                    func.sum(UserActivitySummary.activity_count).label("activity_count"),
                )
                .filter(
                    UserActivitySummary.user_id.in_([u.id for u in users]),
                    UserActivitySummary.activity_type.in_([ActivityType.LOGIN.value, ActivityType.PDF_DOWNLOAD.value]),
                    UserActivitySummary.last_updated >= activity_window_start(),
                )
                .group_by(UserActivitySummary.user_id, UserActivitySummary.activity_type)
                .all()
            )
        for r in rows:
            counts[(r.user_id, r.activity_type)] = int(r.activity_count)

    top = []
    for u in users:
        downloads = counts.get((u.id, ActivityType.PDF_DOWNLOAD.value), 0)
        logins = counts.get((u.id, ActivityType.LOGIN.value), 0)
        if downloads + logins > 0:
            top.append(
                {"id": u.id, "name": u.name, "downloads": downloads, "logins": logins, "totalActivity": downloads + logins}
            )
    # Stable sort: ties keep the newest-first user order.
    top.sort(key=lambda row: row["totalActivity"], reverse=True)

    return {
        "totalUsers": len(users),
        "adminUsers": admin_count,
        "normalUsers": len(users) - admin_count,
        "topUsers": top[:TOP_USERS_LIMIT],
    }
