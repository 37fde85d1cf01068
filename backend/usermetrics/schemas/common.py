from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, field_validator

from usermetrics.models.user import as_utc


class ApiModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    @field_validator("*", mode="after")
    @classmethod
    def _timestamps_in_utc(cls, v):  # noqa: ANN001
        # Stored timestamps are UTC; some drivers drop the offset on the way back.
        if isinstance(v, dt.datetime):
            return as_utc(v)
        return v


class MessageOut(ApiModel):
    message: str
