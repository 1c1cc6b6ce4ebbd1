# =============================================================================
# core/models/paste.py - Paste Schemas
# =============================================================================
# A paste is a text snippet shared by slug. It may be password protected,
# expire at a point in time, or expire after a number of views.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from lib.utils import as_utc, utcnow

SLUG_PATTERN = r"^[A-Za-z0-9_-]{3,50}$"


class PasteCreate(BaseModel):
    """
    Schema for creating a paste.

    Example:
        {
            "content": "print('hello')",
            "slug": "hello-world",
            "password": "s3cret",
            "max_views": 5
        }
    """
    content: str = Field(..., min_length=1)
    slug: str | None = Field(default=None, pattern=SLUG_PATTERN)
    remark: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, min_length=1, max_length=128)
    expires_at: datetime | None = None
    max_views: int | None = Field(default=None, ge=1)

    @field_validator("expires_at")
    @classmethod
    def normalize_expiry(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class PasteRecord(BaseModel):
    """Stored paste. `password_hash` never leaves the service layer."""
    id: str
    slug: str
    content: str
    remark: str | None = None
    password_hash: str | None = None
    expires_at: datetime | None = None
    max_views: int | None = None
    views: int = 0
    created_by: str
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def has_password(self) -> bool:
        return self.password_hash is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once the expiry time passed or the view limit is used up."""
        if self.expires_at is not None and self.expires_at <= (now or utcnow()):
            return True
        return self.max_views is not None and self.views >= self.max_views


class PasteSummary(BaseModel):
    """Paste metadata for listings (no content)."""
    id: str
    slug: str
    remark: str | None
    has_password: bool
    expires_at: datetime | None
    max_views: int | None
    views: int
    created_by: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: PasteRecord) -> "PasteSummary":
        return cls(has_password=record.has_password, **record.model_dump(exclude={"content", "password_hash"}))


class PasteResponse(PasteSummary):
    """Full paste including its content."""
    content: str

    @classmethod
    def from_record(cls, record: PasteRecord) -> "PasteResponse":
        return cls(has_password=record.has_password, **record.model_dump(exclude={"password_hash"}))


class PasteUnlockRequest(BaseModel):
    password: str = Field(..., min_length=1)


class BatchDeleteRequest(BaseModel):
    ids: list[str] = Field(default_factory=list)
