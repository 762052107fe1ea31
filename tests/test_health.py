"""Tests for /health and / endpoints."""

from tests.conftest import user_payload


class TestHealth:

    def test_health_returns_200(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["db"] == "ok"
        assert "uptime_seconds" in data
        assert "version" in data
        assert data["counts"] == {"users": 0, "folders": 0, "documents": 0}

    def test_counts_exclude_deleted(self, client):
        client.post("/v1/users", json=user_payload("alice"))
        gone = client.post("/v1/users", json=user_payload("bob")).json()["id"]
        client.delete(f"/v1/users/{gone}")
        assert client.get("/health").json()["counts"]["users"] == 1

    def test_root_returns_api_info(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Docstore API"


class TestResponseHeaders:

    def test_response_includes_middleware_headers(self, client):
        resp = client.get("/health")
        assert "x-request-id" in resp.headers
        assert resp.headers["x-response-time"].endswith("ms")

    def test_request_id_is_propagated(self, client):
        resp = client.get("/", headers={"X-Request-ID": "abc123"})
        assert resp.headers["x-request-id"] == "abc123"
