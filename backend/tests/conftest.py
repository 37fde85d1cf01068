"""Pytest fixtures for UserMetrics tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from usermetrics.db.session import Database
from usermetrics.main import create_app
from usermetrics.models.enums import UserRole
from usermetrics.services.users import create_user


@pytest.fixture(scope="function")
def database():
    """In-memory SQLite database shared by every session in the test (StaticPool)."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    database = Database(engine=engine)
    database.create_all()
    try:
        yield database
    finally:
        database.dispose()


@pytest.fixture(scope="function")
def db(database: Database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(database: Database):
    app = create_app(database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice(db: Session):
    return create_user(db, name="Alice", email="alice@x.com", role=UserRole.USER)


@pytest.fixture
def admin(db: Session):
    return create_user(db, name="Admin User", email="admin@example.com", role=UserRole.ADMIN, password="admin123")
