"""Tests for /v1/folders endpoints."""

import uuid

from tests.conftest import document_payload, folder_payload, user_payload


def _user(client, username="alice"):
    return client.post("/v1/users", json=user_payload(username)).json()["id"]


def _folder(client, user_id, name="Folder", parent_id=None):
    resp = client.post("/v1/folders", json=folder_payload(user_id, name, parent_id))
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


class TestCreateFolder:

    def test_create_root_folder(self, client):
        user_id = _user(client)
        resp = client.post("/v1/folders", json=folder_payload(user_id, "Notes"))
        assert resp.status_code == 201
        data = resp.json()
        assert data["name"] == "Notes"
        assert data["user_id"] == user_id
        assert data["parent_id"] is None

    def test_unknown_owner_returns_404(self, client):
        resp = client.post("/v1/folders", json=folder_payload(str(uuid.uuid4())))
        assert resp.status_code == 404
        assert resp.json()["error"] == "USER_NOT_FOUND"

    def test_unknown_parent_returns_404(self, client):
        user_id = _user(client)
        resp = client.post("/v1/folders", json=folder_payload(user_id, parent_id=str(uuid.uuid4())))
        assert resp.status_code == 404
        assert resp.json()["error"] == "FOLDER_NOT_FOUND"

    def test_malformed_owner_in_body_returns_422(self, client):
        resp = client.post("/v1/folders", json=folder_payload("not-a-uuid"))
        assert resp.status_code == 422


class TestUpdateFolder:

    def test_self_parent_returns_400(self, client):
        user_id = _user(client)
        folder_id = _folder(client, user_id)
        resp = client.put(f"/v1/folders/{folder_id}", json=folder_payload(user_id, parent_id=folder_id))
        assert resp.status_code == 400
        assert resp.json()["error"] == "SELF_REFERENCE"

    def test_cycle_returns_400(self, client):
        user_id = _user(client)
        top = _folder(client, user_id, "top")
        child = _folder(client, user_id, "child", parent_id=top)
        resp = client.put(f"/v1/folders/{top}", json=folder_payload(user_id, "top", parent_id=child))
        assert resp.status_code == 400
        assert resp.json()["error"] == "CIRCULAR_REFERENCE"

    def test_owner_in_payload_is_ignored(self, client):
        alice, bob = _user(client, "alice"), _user(client, "bob")
        folder_id = _folder(client, alice)
        resp = client.put(f"/v1/folders/{folder_id}", json=folder_payload(bob, "Renamed"))
        assert resp.status_code == 200
        assert resp.json()["user_id"] == alice
        assert resp.json()["name"] == "Renamed"


class TestDeleteFolder:

    def test_nested_folder_scenario(self, client):
        u1 = _user(client)
        f1 = _folder(client, u1, "f1")
        f2 = _folder(client, u1, "f2", parent_id=f1)

        resp = client.delete(f"/v1/folders/{f1}")
        assert resp.status_code == 400
        assert resp.json()["error"] == "FOLDER_HAS_CHILDREN"

        assert client.delete(f"/v1/folders/{f2}").status_code == 204
        assert client.delete(f"/v1/folders/{f1}").status_code == 204
        assert client.get(f"/v1/folders/{f1}").status_code == 404

    def test_folder_with_documents_returns_400(self, client):
        user_id = _user(client)
        folder_id = _folder(client, user_id)
        client.post("/v1/documents", json=document_payload(user_id, folder_id=folder_id))

        resp = client.delete(f"/v1/folders/{folder_id}")
        assert resp.status_code == 400
        body = resp.json()
        assert body["error"] == "FOLDER_HAS_DOCUMENTS"
        assert body["details"]["count"] == 1


class TestListFolders:

    def test_parent_null_filter(self, client):
        user_id = _user(client)
        root = _folder(client, user_id, "root")
        _folder(client, user_id, "child", parent_id=root)

        resp = client.get("/v1/folders", params={"parent_id": "null"})
        assert resp.status_code == 200
        assert [f["id"] for f in resp.json()] == [root]

    def test_parent_filter(self, client):
        user_id = _user(client)
        root = _folder(client, user_id, "root")
        child = _folder(client, user_id, "child", parent_id=root)

        resp = client.get("/v1/folders", params={"parent_id": root})
        assert [f["id"] for f in resp.json()] == [child]

    def test_user_filter(self, client):
        alice, bob = _user(client, "alice"), _user(client, "bob")
        mine = _folder(client, alice)
        _folder(client, bob)

        resp = client.get("/v1/folders", params={"user_id": alice})
        assert [f["id"] for f in resp.json()] == [mine]

    def test_malformed_filter_returns_400(self, client):
        resp = client.get("/v1/folders", params={"parent_id": "garbage"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["error"] == "INVALID_ARGUMENT"
        assert body["details"]["field"] == "parent_id"

    def test_null_sentinel_rejected_for_owner(self, client):
        resp = client.get("/v1/folders", params={"user_id": "null"})
        assert resp.status_code == 400
