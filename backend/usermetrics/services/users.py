from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Query, Session

from usermetrics.core.config import settings
from usermetrics.core.errors import NotFoundError, persistence_errors
from usermetrics.core.security import hash_password
from usermetrics.models.enums import UserRole
from usermetrics.models.user import User, utcnow

logger = logging.getLogger(__name__)


def active_users(db: Session) -> Query:
    return db.query(User).filter(User.is_deleted.is_(False))


def get_active_user(db: Session, user_id: uuid.UUID) -> User:
    with persistence_errors(db, "loading user"):
        user = active_users(db).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError()
    return user


def list_users(db: Session) -> list[User]:
    with persistence_errors(db, "listing users"):
        return active_users(db).order_by(User.created_at.desc()).all()


def create_user(db: Session, *, name: str, email: str, role: UserRole, password: str | None = None) -> User:
    """
    New users always start with a server-side password (the configured default unless a caller passes one).
    Duplicate emails are not reported separately: the insert fails like any other constraint violation.
    """
    user = User(
        name=name,
        email=email,
        role=role,
        password=hash_password(password or settings.default_user_password),
    )
    with persistence_errors(db, "creating user"):
        db.add(user)
        db.commit()
        db.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.role.value)
    return user


def update_user(db: Session, user_id: uuid.UUID, *, name: str, email: str, role: UserRole) -> User:
    user = get_active_user(db, user_id)
    with persistence_errors(db, "updating user"):
        user.name = name
        user.email = email
        user.role = role
        user.updated_at = utcnow()
        db.commit()
        db.refresh(user)
    logger.info("Updated user %s", user.id)
    return user


def soft_delete_user(db: Session, user_id: uuid.UUID) -> User:
    # Activity rows stay behind; they are still keyed by user_id.
    user = get_active_user(db, user_id)
    with persistence_errors(db, "deleting user"):
        user.is_deleted = True
        user.deleted_at = utcnow()
        db.commit()
    logger.info("Soft-deleted user %s", user.id)
    return user
