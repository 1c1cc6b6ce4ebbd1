# =============================================================================
# tests/test_models.py - Pydantic Model and Utility Tests
# =============================================================================
# Unit tests for models and helpers to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Expiry and masking rules behave as documented
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.models import (
    ApiKeyCreate,
    ApiKeyRecord,
    ApiKeyResponse,
    PasteCreate,
    PasteRecord,
    StorageConfigCreate,
    StorageConfigRecord,
    StorageConfigResponse,
    StorageProvider,
)
from lib.utils import as_utc, generate_slug, hash_password, mask_secret, utcnow, verify_password


# =============================================================================
# Utility Tests
# =============================================================================

class TestUtils:
    """Tests for lib.utils helpers."""

    def test_as_utc_assumes_naive_is_utc(self):
        naive = datetime(2026, 1, 1, 12, 0)
        assert as_utc(naive) == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_as_utc_converts_offsets(self):
        plus_two = datetime(2026, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert as_utc(plus_two) == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_mask_secret(self):
        assert mask_secret("abcdefghijkl") == "abcd****ijkl"
        assert mask_secret("short") == "*****"

    def test_password_hash_roundtrip(self):
        digest = hash_password("pw", rounds=4)

        assert verify_password("pw", digest)
        assert not verify_password("other", digest)
        assert not verify_password(None, digest)

    def test_password_hash_is_salted_bcrypt(self):
        first = hash_password("pw", rounds=4)
        second = hash_password("pw", rounds=4)

        assert first != second
        assert first.startswith("$2b$04$")

    def test_long_password_accepted(self):
        digest = hash_password("x" * 100, rounds=4)
        assert verify_password("x" * 100, digest)

    def test_generate_slug(self):
        slug = generate_slug()

        assert len(slug) == 6
        assert slug.isalnum()


# =============================================================================
# Paste Model Tests
# =============================================================================

class TestPasteModels:
    """Tests for paste schemas."""

    def test_naive_expiry_normalized(self):
        paste = PasteCreate(content="x", expires_at=datetime(2030, 1, 1))
        assert paste.expires_at.tzinfo == timezone.utc

    def test_slug_pattern(self):
        with pytest.raises(ValidationError):
            PasteCreate(content="x", slug="a b")

    def test_max_views_positive(self):
        with pytest.raises(ValidationError):
            PasteCreate(content="x", max_views=0)

    def test_expired_by_time(self):
        record = PasteRecord(
            id="1", slug="s", content="x", created_by="admin:admin",
            expires_at=utcnow() - timedelta(seconds=1),
        )
        assert record.is_expired()

    def test_expired_by_views(self):
        record = PasteRecord(id="1", slug="s", content="x", created_by="admin:admin", max_views=2, views=2)
        assert record.is_expired()

    def test_not_expired(self):
        record = PasteRecord(id="1", slug="s", content="x", created_by="admin:admin", max_views=2, views=1)

        assert not record.is_expired()
        assert not record.has_password


# =============================================================================
# API Key Model Tests
# =============================================================================

class TestApiKeyModels:
    """Tests for API key schemas."""

    def test_name_required(self):
        with pytest.raises(ValidationError):
            ApiKeyCreate(name="")

    def test_response_masks_key(self):
        record = ApiKeyRecord(id="1", name="k", key="0123456789abcdef")

        assert ApiKeyResponse.from_record(record).key == "0123********cdef"
        assert ApiKeyResponse.from_record(record, reveal=True).key == "0123456789abcdef"

    def test_key_expiry(self):
        record = ApiKeyRecord(id="1", name="k", key="x", expires_at=utcnow() + timedelta(days=1))
        assert not record.is_expired()


# =============================================================================
# Storage Config Model Tests
# =============================================================================

class TestStorageConfigModels:
    """Tests for storage config schemas."""

    def test_defaults(self):
        config = StorageConfigCreate(
            name="n", endpoint_url="https://s3", bucket_name="b",
            access_key_id="AKIA0000", secret_access_key="secret",
        )

        assert config.provider_type == StorageProvider.OTHER
        assert config.is_public is False

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValidationError):
            StorageConfigCreate(
                name="n", provider_type="FTP", endpoint_url="https://s3", bucket_name="b",
                access_key_id="AKIA0000", secret_access_key="secret",
            )

    def test_response_excludes_secret(self):
        record = StorageConfigRecord(
            id="1", name="n", endpoint_url="https://s3", bucket_name="b",
            access_key_id="AKIA0000ZZZZ", secret_access_key="secret",
        )

        response = StorageConfigResponse.from_record(record)

        assert "secret_access_key" not in response.model_dump()
        assert response.access_key_id == "AKIA****ZZZZ"
