"""Login: same 401 for unknown email and wrong password, login activity only on success."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from usermetrics.core.config import settings
from usermetrics.models.activity import UserActivity, UserActivitySummary
from usermetrics.models.user import User


def test_login_returns_user_without_password_and_logs_it(client: TestClient, db: Session, admin: User):
    r = client.post("/api/auth/login", json={"email": "admin@example.com", "password": "admin123"})
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == str(admin.id)
    assert body["role"] == "Admin"
    assert "password" not in body

    activity = db.query(UserActivity).filter(UserActivity.user_id == admin.id).all()
    assert [(a.activity_type, a.details) for a in activity] == [("login", "User logged in")]
    summary = db.query(UserActivitySummary).filter(UserActivitySummary.user_id == admin.id).one()
    assert summary.activity_count == 1


def test_wrong_password_is_401_and_not_logged(client: TestClient, db: Session, admin: User):
    r = client.post("/api/auth/login", json={"email": "admin@example.com", "password": "wrong-password"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid email or password"}
    assert db.query(UserActivity).count() == 0


def test_unknown_email_looks_like_wrong_password(client: TestClient, admin: User):
    unknown = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "admin123"})
    wrong = client.post("/api/auth/login", json={"email": "admin@example.com", "password": "nope-nope"})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()


def test_created_user_logs_in_with_default_password(client: TestClient):
    client.post("/api/users", json={"name": "Carol", "email": "carol@x.com", "role": "User"})
    r = client.post("/api/auth/login", json={"email": "carol@x.com", "password": settings.default_user_password})
    assert r.status_code == 200
    assert r.json()["name"] == "Carol"


def test_deleted_user_cannot_log_in(client: TestClient, admin: User):
    client.delete(f"/api/users/{admin.id}")
    r = client.post("/api/auth/login", json={"email": "admin@example.com", "password": "admin123"})
    assert r.status_code == 401
