from __future__ import annotations

import datetime as dt
import uuid

from pydantic import BaseModel, Field

from usermetrics.models.enums import UserRole
from usermetrics.schemas.common import ApiModel


class UserIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    role: UserRole


class UserCreate(UserIn):
    pass


class UserUpdate(UserIn):
    pass


class UserOut(ApiModel):
    # No password field: the hash never leaves the service layer.
    id: uuid.UUID
    name: str
    email: str
    role: UserRole
    created_at: dt.datetime
    updated_at: dt.datetime
    deleted_at: dt.datetime | None
    is_deleted: bool
