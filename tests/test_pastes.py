# =============================================================================
# tests/test_pastes.py - Paste Endpoint Tests
# =============================================================================

from datetime import timedelta

import pytest

from lib.utils import utcnow


@pytest.fixture
def text_headers(text_key):
    return {"X-API-KEY": text_key}


def create_paste(client, headers, **fields):
    payload = {"content": "hello world", **fields}
    return client.post("/api/paste", json=payload, headers=headers)


# =============================================================================
# Creating Pastes
# =============================================================================

class TestCreatePaste:
    """Tests for POST /api/paste."""

    def test_admin_can_create(self, client, admin_headers):
        response = create_paste(client, admin_headers, slug="from-admin")

        assert response.status_code == 201
        body = response.json()
        assert body["slug"] == "from-admin"
        assert body["content"] == "hello world"
        assert body["created_by"] == "admin:admin"
        assert "password_hash" not in body

    def test_text_key_can_create(self, client, text_headers):
        response = create_paste(client, text_headers)

        assert response.status_code == 201
        assert len(response.json()["slug"]) == 6
        assert response.json()["created_by"].startswith("apikey:")

    def test_file_only_key_forbidden(self, client, file_key):
        response = create_paste(client, {"X-API-KEY": file_key})

        assert response.status_code == 403
        assert response.json() == {"status": 403, "message": "API key does not have text permission"}

    def test_anonymous_rejected(self, client):
        response = create_paste(client, {})
        assert response.status_code == 401

    def test_empty_content_rejected(self, client, admin_headers):
        response = create_paste(client, admin_headers, content="")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request parameters"

    def test_bad_slug_rejected(self, client, admin_headers):
        assert create_paste(client, admin_headers, slug="no spaces!").status_code == 400

    def test_duplicate_slug_conflict(self, client, admin_headers):
        create_paste(client, admin_headers, slug="taken")
        response = create_paste(client, admin_headers, slug="taken")

        assert response.status_code == 409
        assert response.json()["message"] == "Slug already in use: taken"


# =============================================================================
# Reading Pastes
# =============================================================================

class TestReadPaste:
    """Tests for public paste access."""

    def test_read_counts_views(self, client, admin_headers):
        create_paste(client, admin_headers, slug="counted")

        first = client.get("/api/paste/counted").json()
        second = client.get("/api/paste/counted").json()

        assert first["views"] == 1
        assert second["views"] == 2

    def test_unknown_slug(self, client):
        response = client.get("/api/paste/nope")

        assert response.status_code == 404
        assert response.json()["message"] == "Paste not found: nope"

    def test_view_limit(self, client, admin_headers):
        create_paste(client, admin_headers, slug="once", max_views=1)

        assert client.get("/api/paste/once").status_code == 200
        response = client.get("/api/paste/once")
        assert response.status_code == 410
        assert response.json() == {"status": 410, "message": "Paste has expired"}

    def test_expired(self, client, admin_headers):
        past = (utcnow() - timedelta(minutes=1)).isoformat()
        create_paste(client, admin_headers, slug="stale", expires_at=past)

        assert client.get("/api/paste/stale").status_code == 410

    def test_password_required(self, client, admin_headers):
        create_paste(client, admin_headers, slug="locked", password="s3cret")

        response = client.get("/api/paste/locked")

        assert response.status_code == 403
        assert response.json() == {
            "status": 403,
            "message": "This paste is password protected",
            "code": "PASSWORD_REQUIRED",
        }

    def test_unlock_with_password(self, client, admin_headers):
        create_paste(client, admin_headers, slug="locked", password="s3cret")

        wrong = client.post("/api/paste/locked", json={"password": "guess"})
        right = client.post("/api/paste/locked", json={"password": "s3cret"})

        assert wrong.status_code == 403
        assert wrong.json()["code"] == "PASSWORD_INCORRECT"
        assert right.status_code == 200
        assert right.json()["content"] == "hello world"
        assert right.json()["has_password"] is True

    def test_password_stored_as_bcrypt_hash(self, client, app, admin_headers):
        create_paste(client, admin_headers, slug="locked", password="s3cret")

        stored = app.state.pastes.get_by_slug("locked").password_hash

        assert stored.startswith("$2b$")
        assert "s3cret" not in stored

    def test_raw(self, client, admin_headers):
        create_paste(client, admin_headers, slug="plain", content="line one\nline two")

        response = client.get("/api/raw/plain")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "line one\nline two"

    def test_raw_with_password_query(self, client, admin_headers):
        create_paste(client, admin_headers, slug="plain", password="pw")

        assert client.get("/api/raw/plain").status_code == 403
        assert client.get("/api/raw/plain", params={"password": "pw"}).status_code == 200


# =============================================================================
# Owner and Admin Management
# =============================================================================

class TestManagePastes:
    """Tests for the user and admin paste groups."""

    def test_user_lists_only_own_pastes(self, client, admin_headers, text_headers):
        create_paste(client, admin_headers, slug="admins")
        create_paste(client, text_headers, slug="mine")

        response = client.get("/api/user/pastes", headers=text_headers)

        assert [p["slug"] for p in response.json()] == ["mine"]
        assert "content" not in response.json()[0]

    def test_user_cannot_delete_others(self, client, admin_headers, text_headers):
        create_paste(client, admin_headers, slug="admins")

        response = client.delete("/api/user/pastes/admins", headers=text_headers)
        assert response.status_code == 404

    def test_user_deletes_own(self, client, text_headers):
        create_paste(client, text_headers, slug="mine")

        assert client.delete("/api/user/pastes/mine", headers=text_headers).status_code == 200
        assert client.get("/api/paste/mine").status_code == 404

    def test_admin_routes_self_check(self, client, text_headers):
        # Not gated by the dispatcher, but still admin-only
        assert client.get("/api/admin/pastes").status_code == 401
        assert client.get("/api/admin/pastes", headers=text_headers).status_code == 401

    def test_admin_get_bypasses_password(self, client, admin_headers):
        paste_id = create_paste(client, admin_headers, password="pw").json()["id"]

        response = client.get(f"/api/admin/pastes/{paste_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["content"] == "hello world"
        assert response.json()["views"] == 0

    def test_admin_delete(self, client, admin_headers):
        paste_id = create_paste(client, admin_headers).json()["id"]

        assert client.delete(f"/api/admin/pastes/{paste_id}", headers=admin_headers).status_code == 200
        assert client.delete(f"/api/admin/pastes/{paste_id}", headers=admin_headers).status_code == 404

    def test_batch_delete(self, client, admin_headers):
        ids = [create_paste(client, admin_headers).json()["id"] for _ in range(3)]

        response = client.post(
            "/api/admin/pastes/batch-delete",
            json={"ids": ids[:2] + ["unknown"]},
            headers=admin_headers,
        )

        assert response.json() == {"deleted": 2}
        assert len(client.get("/api/admin/pastes", headers=admin_headers).json()) == 1

    def test_batch_delete_requires_ids(self, client, admin_headers):
        response = client.post("/api/admin/pastes/batch-delete", json={"ids": []}, headers=admin_headers)
        assert response.status_code == 400

    def test_clear_expired(self, client, admin_headers):
        create_paste(client, admin_headers, slug="fresh")
        create_paste(client, admin_headers, slug="stale", expires_at=(utcnow() - timedelta(hours=1)).isoformat())

        response = client.post("/api/admin/pastes/clear-expired", headers=admin_headers)

        assert response.json() == {"deleted": 1}
        slugs = [p["slug"] for p in client.get("/api/admin/pastes", headers=admin_headers).json()]
        assert slugs == ["fresh"]
