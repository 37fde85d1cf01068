"""Directory service: soft delete semantics and stored password."""

import pytest
from sqlalchemy.orm import Session

from usermetrics.core.config import settings
from usermetrics.core.errors import NotFoundError
from usermetrics.core.security import verify_password
from usermetrics.models.enums import UserRole
from usermetrics.models.user import User
from usermetrics.services.users import create_user, list_users, soft_delete_user, update_user


def test_create_assigns_hashed_default_password(db: Session):
    user = create_user(db, name="Bob", email="bob@x.com", role=UserRole.USER)
    assert user.password != settings.default_user_password
    assert verify_password(settings.default_user_password, user.password)


def test_soft_delete_keeps_row(db: Session, alice: User):
    soft_delete_user(db, alice.id)
    row = db.get(User, alice.id)
    assert row is not None
    assert row.is_deleted is True
    assert row.deleted_at is not None
    assert list_users(db) == []


def test_second_soft_delete_is_not_found(db: Session, alice: User):
    soft_delete_user(db, alice.id)
    with pytest.raises(NotFoundError):
        soft_delete_user(db, alice.id)


def test_update_touches_updated_at(db: Session, alice: User):
    before = alice.updated_at
    updated = update_user(db, alice.id, name="Alice", email="alice@x.com", role=UserRole.ADMIN)
    assert updated.role == UserRole.ADMIN
    assert updated.updated_at >= before


def test_update_deleted_user_is_not_found(db: Session, alice: User):
    soft_delete_user(db, alice.id)
    with pytest.raises(NotFoundError):
        update_user(db, alice.id, name="A", email="a@x.com", role=UserRole.USER)
