"""Directory CRUD over the HTTP API, including soft delete."""

import uuid

from fastapi.testclient import TestClient


def _create(client: TestClient, name="Alice", email="alice@x.com", role="User"):
    return client.post("/api/users", json={"name": name, "email": email, "role": role})


def test_create_user_then_list_contains_it(client: TestClient):
    r = _create(client)
    assert r.status_code == 201
    created = r.json()
    assert uuid.UUID(created["id"])
    assert created["role"] == "User"
    assert created["is_deleted"] is False
    assert created["deleted_at"] is None
    assert created["created_at"] and created["updated_at"]
    assert "password" not in created

    listed = client.get("/api/users").json()
    assert [u["email"] for u in listed] == ["alice@x.com"]
    assert listed[0]["id"] == created["id"]
    assert "password" not in listed[0]


def test_list_is_newest_first(client: TestClient):
    _create(client, name="First", email="first@x.com")
    _create(client, name="Second", email="second@x.com", role="Admin")
    names = [u["name"] for u in client.get("/api/users").json()]
    assert names == ["Second", "First"]


def test_create_rejects_unknown_role(client: TestClient):
    r = _create(client, role="Superuser")
    assert r.status_code == 422
    assert "error" in r.json()
    assert client.get("/api/users").json() == []


def test_duplicate_email_is_a_generic_internal_error(client: TestClient):
    assert _create(client).status_code == 201
    r = _create(client, name="Other Alice")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}


def test_update_user(client: TestClient):
    user_id = _create(client).json()["id"]
    r = client.put(f"/api/users/{user_id}", json={"name": "Alice B", "email": "aliceb@x.com", "role": "Admin"})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Alice B"
    assert body["email"] == "aliceb@x.com"
    assert body["role"] == "Admin"
    assert "password" not in body


def test_update_unknown_user_is_not_found(client: TestClient):
    r = client.put(f"/api/users/{uuid.uuid4()}", json={"name": "X", "email": "x@x.com", "role": "User"})
    assert r.status_code == 404
    assert r.json() == {"error": "User not found"}


def test_soft_delete_hides_user_and_blocks_update_and_delete(client: TestClient):
    user_id = _create(client).json()["id"]

    r = client.delete(f"/api/users/{user_id}")
    assert r.status_code == 200
    assert r.json() == {"message": "User deleted successfully"}

    assert client.get("/api/users").json() == []
    r = client.put(f"/api/users/{user_id}", json={"name": "A", "email": "a@x.com", "role": "User"})
    assert r.status_code == 404
    r = client.delete(f"/api/users/{user_id}")
    assert r.status_code == 404
    assert r.json() == {"error": "User not found"}


def test_malformed_id_is_rejected(client: TestClient):
    r = client.delete("/api/users/not-a-uuid")
    assert r.status_code == 422
    assert "error" in r.json()


def test_health(client: TestClient):
    assert client.get("/health").json() == {"status": "ok"}
