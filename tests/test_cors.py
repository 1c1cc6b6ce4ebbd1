# =============================================================================
# tests/test_cors.py - CORS Policy Tests
# =============================================================================
# Preflight requests are answered for every path, before any credential
# gate or route lookup runs.
# =============================================================================

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from app.main import create_app

CONFIGURED_METHODS = {"GET", "POST", "PUT", "DELETE", "OPTIONS"}
CONFIGURED_HEADERS = {"content-type", "authorization", "x-api-key"}


def preflight(client, path: str, origin: str = "https://paste.example.com"):
    return client.options(
        path,
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type, Authorization, X-API-KEY",
        },
    )


def split_header(value: str) -> set[str]:
    return {item.strip() for item in value.split(",")}


class TestPreflight:
    """Tests for OPTIONS preflight responses."""

    @pytest.mark.parametrize("path", [
        "/api/health",
        "/api/paste",
        "/api/admin/files/some-file",
        "/api/user/files",
        "/api/route/that/does/not/exist",
    ])
    def test_preflight_declares_policy(self, client, path):
        response = preflight(client, path)

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert split_header(response.headers["access-control-allow-methods"]) == CONFIGURED_METHODS
        allowed = {h.lower() for h in split_header(response.headers["access-control-allow-headers"])}
        assert CONFIGURED_HEADERS <= allowed
        assert response.headers["access-control-max-age"] == "86400"

    @pytest.mark.parametrize("origin", [
        "https://a.example.com",
        "http://localhost:5173",
        "null",
    ])
    def test_preflight_independent_of_origin(self, client, origin):
        response = preflight(client, "/api/paste", origin=origin)

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight_skips_credential_gate(self, client):
        # No credentials sent, yet the gated namespace answers the preflight
        response = preflight(client, "/api/admin/files")

        assert response.status_code == 200
        assert "status" not in response.text

    def test_unconfigured_method_rejected(self, client):
        response = client.options(
            "/api/paste",
            headers={
                "Origin": "https://a.example.com",
                "Access-Control-Request-Method": "PATCH",
            },
        )

        assert response.status_code == 400


class TestSimpleRequests:
    """CORS headers on regular responses, including errors."""

    def test_success_response_has_allow_origin(self, client):
        response = client.get("/api/health", headers={"Origin": "https://a.example.com"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_gate_rejection_has_allow_origin(self, client):
        response = client.get("/api/user/files", headers={"Origin": "https://a.example.com"})

        assert response.status_code == 401
        assert response.headers["access-control-allow-origin"] == "*"

    def test_not_found_has_allow_origin(self, client):
        response = client.get("/api/missing", headers={"Origin": "https://a.example.com"})

        assert response.status_code == 404
        assert response.headers["access-control-allow-origin"] == "*"

    def test_internal_failure_has_allow_origin(self):
        router = APIRouter()

        @router.get("/api/crash")
        async def crash():
            raise RuntimeError("disk on fire")

        client = TestClient(create_app(route_groups=[router], registrars=[], gates=[]))
        response = client.get("/api/crash", headers={"Origin": "https://a.example.com"})

        assert response.status_code == 500
        assert response.json() == {"status": 500, "message": "Internal server error"}
        assert response.headers["access-control-allow-origin"] == "*"
