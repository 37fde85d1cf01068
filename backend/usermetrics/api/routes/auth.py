from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from usermetrics.db.session import get_db
from usermetrics.schemas.auth import LoginRequest
from usermetrics.schemas.user import UserOut
from usermetrics.services.auth import authenticate_user

router = APIRouter()


@router.post("/login", response_model=UserOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    # No session/token here: the dashboard's auth layer keeps its own session from this response.
    return authenticate_user(db, payload.email, payload.password)
