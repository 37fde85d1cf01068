from usermetrics.models.activity import UserActivity, UserActivitySummary
from usermetrics.models.enums import ActivityType, UserRole
from usermetrics.models.user import User

__all__ = ["ActivityType", "User", "UserActivity", "UserActivitySummary", "UserRole"]
