# =============================================================================
# core/models/file.py - Shared File Schemas
# =============================================================================
# Metadata for uploaded files. The bytes themselves are held by FileService
# and are only returned by the file-view endpoints.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from lib.utils import as_utc, utcnow
from .paste import SLUG_PATTERN


class FileRecord(BaseModel):
    """Stored file metadata."""
    id: str
    slug: str
    filename: str
    mimetype: str = "application/octet-stream"
    size: int
    remark: str | None = None
    password_hash: str | None = None
    expires_at: datetime | None = None
    max_views: int | None = None
    views: int = 0
    storage_config_id: str | None = None
    created_by: str
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def has_password(self) -> bool:
        return self.password_hash is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is not None and self.expires_at <= (now or utcnow()):
            return True
        return self.max_views is not None and self.views >= self.max_views


class FileResponse(BaseModel):
    """
    File metadata returned to owners and admins.

    Example:
        {
            "id": "0b6c...",
            "slug": "Xk3p9Q",
            "filename": "report.pdf",
            "mimetype": "application/pdf",
            "size": 48213,
            "views": 0
        }
    """
    id: str
    slug: str
    filename: str
    mimetype: str
    size: int
    remark: str | None
    has_password: bool
    expires_at: datetime | None
    max_views: int | None
    views: int
    storage_config_id: str | None
    created_by: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileResponse":
        return cls(has_password=record.has_password, **record.model_dump(exclude={"password_hash"}))


class FileUpdate(BaseModel):
    """
    Editable file metadata.

    An empty string for `password` removes the password.
    """
    slug: str | None = Field(default=None, pattern=SLUG_PATTERN)
    remark: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, max_length=128)
    expires_at: datetime | None = None
    max_views: int | None = Field(default=None, ge=1)

    @field_validator("expires_at")
    @classmethod
    def normalize_expiry(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)
