from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from usermetrics.models.enums import UserRole
from usermetrics.schemas.common import ApiModel


class ActivityLogRequest(BaseModel):
    activity_type: str = Field(min_length=1, max_length=50)
    details: str | None = None


class ActivityOut(ApiModel):
    activity_type: str
    activity_timestamp: dt.datetime
    details: str | None


class ActivitySummaryOut(ApiModel):
    activity_type: str
    activity_count: int
    last_updated: dt.datetime


class UserProfileOut(ApiModel):
    name: str
    email: str
    role: UserRole


class UserActivityResponse(ApiModel):
    user: UserProfileOut
    recentActivities: list[ActivityOut]  # noqa: N815
    activitySummary: list[ActivitySummaryOut]  # noqa: N815
