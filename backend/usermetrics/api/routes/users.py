from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from usermetrics.db.session import get_db
from usermetrics.schemas.common import MessageOut
from usermetrics.schemas.user import UserCreate, UserOut, UserUpdate
from usermetrics.services import users as user_service

router = APIRouter()


@router.get("", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return user_service.create_user(db, name=payload.name, email=payload.email, role=payload.role)


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: uuid.UUID, payload: UserUpdate, db: Session = Depends(get_db)):
    return user_service.update_user(db, user_id, name=payload.name, email=payload.email, role=payload.role)


@router.delete("/{user_id}", response_model=MessageOut)
def delete_user(user_id: uuid.UUID, db: Session = Depends(get_db)):
    user_service.soft_delete_user(db, user_id)
    return MessageOut(message="User deleted successfully")
