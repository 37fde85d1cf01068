"""Dashboard statistics."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from usermetrics.models.enums import UserRole
from usermetrics.services.activity import record_activity
from usermetrics.services.dashboard import dashboard_stats
from usermetrics.services.users import create_user, soft_delete_user


def test_empty_directory(db: Session):
    assert dashboard_stats(db) == {"totalUsers": 0, "adminUsers": 0, "normalUsers": 0, "topUsers": []}


def test_counts_and_top_users(db: Session):
    users = [
        create_user(db, name=f"User {i}", email=f"user{i}@x.com", role=UserRole.ADMIN if i == 0 else UserRole.USER)
        for i in range(7)
    ]
    gone = create_user(db, name="Gone", email="gone@x.com", role=UserRole.ADMIN)
    record_activity(db, gone.id, "login")
    soft_delete_user(db, gone.id)

    # users[i] gets i logins; users[6] also downloads twice; "export" is not counted.
    for i, u in enumerate(users):
        for _ in range(i):
            record_activity(db, u.id, "login")
    record_activity(db, users[6].id, "pdf_download")
    record_activity(db, users[6].id, "pdf_download")
    record_activity(db, users[1].id, "export")

    stats = dashboard_stats(db)
    assert stats["totalUsers"] == 7
    assert stats["adminUsers"] == 1
    assert stats["normalUsers"] == 6
    assert [(row["name"], row["logins"], row["downloads"], row["totalActivity"]) for row in stats["topUsers"]] == [
        ("User 6", 6, 2, 8),
        ("User 5", 5, 0, 5),
        ("User 4", 4, 0, 4),
        ("User 3", 3, 0, 3),
        ("User 2", 2, 0, 2),
    ]


def test_stats_endpoint(client: TestClient, db: Session):
    alice = create_user(db, name="Alice", email="alice@x.com", role=UserRole.USER)
    record_activity(db, alice.id, "login")
    body = client.get("/api/dashboard/stats").json()
    assert body["totalUsers"] == 1
    assert body["topUsers"] == [
        {"id": str(alice.id), "name": "Alice", "downloads": 0, "logins": 1, "totalActivity": 1}
    ]
