from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from usermetrics.db.session import get_db
from usermetrics.schemas.dashboard import DashboardStatsResponse
from usermetrics.services.dashboard import dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(db: Session = Depends(get_db)):
    return dashboard_stats(db)
