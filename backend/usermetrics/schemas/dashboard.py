from __future__ import annotations

import uuid

from usermetrics.schemas.common import ApiModel


class TopUserRow(ApiModel):
    id: uuid.UUID
    name: str
    downloads: int
    logins: int
    totalActivity: int  # noqa: N815


class DashboardStatsResponse(ApiModel):
    totalUsers: int  # noqa: N815
    adminUsers: int  # noqa: N815
    normalUsers: int  # noqa: N815
    topUsers: list[TopUserRow]  # noqa: N815
