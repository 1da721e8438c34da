"""Tests for liveness endpoints, middleware and the error envelope."""

import json

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.exceptions import DatabaseIntegrityError, register_exception_handlers


class TestSystemEndpoints:

    def test_root_is_plain_text(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "is running" in response.text

    def test_ping(self, client):
        body = client.get("/api/ping").json()

        assert body["message"] == "pong"
        assert body["database"] == "sqlite"
        assert body["timestamp"]

    def test_health_when_connected(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["uptime"] >= 0


class TestErrorEnvelope:

    def test_unknown_route(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_invalid_json_body(self, client):
        response = client.post(
            "/api/device",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_oversized_body(self, make_client):
        client = make_client(MAX_BODY_BYTES=64)

        response = client.post("/api/touch", json={"touchData": [{"x": 1, "y": 2}] * 20})

        assert response.status_code == 413
        assert response.json()["success"] is False

    def test_oversized_chunked_body(self, make_client):
        client = make_client(MAX_BODY_BYTES=64)
        body = json.dumps({"touchData": [{"timestamp": 1, "x": 1, "y": 2, "type": "tap"}] * 20}).encode()

        response = client.post(
            "/api/touch",
            content=(body[i:i + 50] for i in range(0, len(body), 50)),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 413
        assert response.json()["success"] is False
        assert client.get("/api/touch").json()["count"] == 0

    def test_small_chunked_body_is_accepted(self, client):
        body = json.dumps({"touchData": [{"timestamp": 1, "x": 1, "y": 2, "type": "tap"}]}).encode()

        response = client.post(
            "/api/touch",
            content=(body[i:i + 16] for i in range(0, len(body), 16)),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 201
        assert response.json()["count"] == 1

    def test_integrity_error_hides_driver_detail(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/broken")
        def broken():
            raise DatabaseIntegrityError("NOT NULL constraint failed: touchevents.x")

        response = TestClient(app).get("/broken")

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Record violates a storage constraint"}
