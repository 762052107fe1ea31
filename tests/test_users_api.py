"""Tests for /v1/users endpoints."""

import uuid

from tests.conftest import user_payload


class TestCreateUser:

    def test_create_returns_201(self, client):
        resp = client.post("/v1/users", json=user_payload("alice"))
        assert resp.status_code == 201
        data = resp.json()
        assert uuid.UUID(data["id"])
        assert data["username"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["deleted_at"] is None

    def test_preset_id_is_kept(self, client):
        preset = str(uuid.uuid4())
        resp = client.post("/v1/users", json=user_payload("alice", id=preset))
        assert resp.status_code == 201
        assert resp.json()["id"] == preset

    def test_duplicate_username_returns_409(self, client):
        client.post("/v1/users", json=user_payload("alice"))
        resp = client.post("/v1/users", json=user_payload("alice", email="second@example.com"))
        assert resp.status_code == 409
        body = resp.json()
        assert body["error"] == "CONSTRAINT_VIOLATION"
        assert body["details"]["entity"] == "user"

    def test_blank_username_returns_422(self, client):
        resp = client.post("/v1/users", json=user_payload("  ", email="x@example.com"))
        assert resp.status_code == 422


class TestGetUser:

    def test_get(self, client):
        user_id = client.post("/v1/users", json=user_payload()).json()["id"]
        resp = client.get(f"/v1/users/{user_id}")
        assert resp.status_code == 200
        assert resp.json()["id"] == user_id

    def test_missing_returns_404(self, client):
        resp = client.get(f"/v1/users/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["error"] == "USER_NOT_FOUND"

    def test_malformed_id_returns_400(self, client):
        resp = client.get("/v1/users/not-a-uuid")
        assert resp.status_code == 400
        body = resp.json()
        assert body["error"] == "INVALID_ARGUMENT"
        assert body["details"]["field"] == "id"


class TestUpdateUser:

    def test_update(self, client):
        user_id = client.post("/v1/users", json=user_payload("alice")).json()["id"]
        resp = client.put(f"/v1/users/{user_id}", json=user_payload("alicia"))
        assert resp.status_code == 200
        assert resp.json()["username"] == "alicia"
        assert client.get(f"/v1/users/{user_id}").json()["email"] == "alicia@example.com"

    def test_update_missing_returns_404(self, client):
        resp = client.put(f"/v1/users/{uuid.uuid4()}", json=user_payload())
        assert resp.status_code == 404


class TestDeleteAndListUsers:

    def test_delete_returns_204(self, client):
        user_id = client.post("/v1/users", json=user_payload()).json()["id"]
        resp = client.delete(f"/v1/users/{user_id}")
        assert resp.status_code == 204
        assert client.get(f"/v1/users/{user_id}").status_code == 404

    def test_list_includes_deleted_users(self, client):
        alive = client.post("/v1/users", json=user_payload("alice")).json()["id"]
        gone = client.post("/v1/users", json=user_payload("bob")).json()["id"]
        client.delete(f"/v1/users/{gone}")

        resp = client.get("/v1/users")
        assert resp.status_code == 200
        listed = {u["id"]: u for u in resp.json()}
        assert set(listed) == {alive, gone}
        assert listed[gone]["deleted_at"] is not None

    def test_list_empty(self, client):
        resp = client.get("/v1/users")
        assert resp.status_code == 200
        assert resp.json() == []
