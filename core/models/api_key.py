# =============================================================================
# core/models/api_key.py - API Key Schemas
# =============================================================================
# API keys let end users create pastes and upload/manage files without an
# admin session. Each key carries independent text and file permissions.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from lib.utils import as_utc, mask_secret, utcnow


class ApiKeyCreate(BaseModel):
    """
    Schema for creating an API key.

    Example:
        {
            "name": "ci-uploader",
            "text_permission": false,
            "file_permission": true,
            "expires_at": "2026-12-31T00:00:00Z"
        }
    """
    name: str = Field(..., min_length=1, max_length=64)
    text_permission: bool = False
    file_permission: bool = False
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def normalize_expiry(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class ApiKeyUpdate(BaseModel):
    """Partial update; only fields that are sent are changed."""
    name: str | None = Field(default=None, min_length=1, max_length=64)
    text_permission: bool | None = None
    file_permission: bool | None = None
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def normalize_expiry(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class ApiKeyRecord(BaseModel):
    """Stored API key."""
    id: str
    name: str
    key: str
    text_permission: bool = False
    file_permission: bool = False
    expires_at: datetime | None = None
    created_at: datetime = Field(default_factory=utcnow)
    last_used: datetime | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or utcnow())


class ApiKeyResponse(BaseModel):
    """
    API key as returned to admins.

    The key value is masked except in the response to the create call.
    """
    id: str
    name: str
    key: str
    text_permission: bool
    file_permission: bool
    expires_at: datetime | None
    created_at: datetime
    last_used: datetime | None

    @classmethod
    def from_record(cls, record: ApiKeyRecord, reveal: bool = False) -> "ApiKeyResponse":
        data = record.model_dump()
        if not reveal:
            data["key"] = mask_secret(record.key)
        return cls(**data)
