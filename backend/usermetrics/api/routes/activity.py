"""Per-user activity: view, log, and PDF report."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from usermetrics.db.session import get_db
from usermetrics.schemas.activity import (
    ActivityLogRequest,
    ActivityOut,
    ActivitySummaryOut,
    UserActivityResponse,
    UserProfileOut,
)
from usermetrics.schemas.common import MessageOut
from usermetrics.services.activity import load_activity_report, record_activity
from usermetrics.services.reports import generate_activity_report, report_filename

router = APIRouter()


@router.get("/{user_id}/activity", response_model=UserActivityResponse)
def get_user_activity(user_id: uuid.UUID, db: Session = Depends(get_db)):
    report = load_activity_report(db, user_id)
    return UserActivityResponse(
        user=UserProfileOut.model_validate(report.user),
        recentActivities=[ActivityOut.model_validate(a) for a in report.recent_activities],
        activitySummary=[ActivitySummaryOut.model_validate(s) for s in report.summary],
    )


@router.post("/{user_id}/activity/log", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def log_user_activity(user_id: uuid.UUID, payload: ActivityLogRequest, db: Session = Depends(get_db)):
    record_activity(db, user_id, payload.activity_type, payload.details)
    return MessageOut(message="Activity logged successfully")


@router.get(
    "/{user_id}/activity-pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def download_activity_report(user_id: uuid.UUID, db: Session = Depends(get_db)) -> Response:
    """
    Renders the whole document before responding, so lookup/render failures still get a JSON error body.
    Generating the report logs a pdf_download activity.
    """
    data = generate_activity_report(db, user_id)
    headers = {"Content-Disposition": f'attachment; filename="{report_filename(user_id)}"'}
    return Response(content=data, media_type="application/pdf", headers=headers)
