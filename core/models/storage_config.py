# =============================================================================
# core/models/storage_config.py - Storage Backend Configuration Schemas
# =============================================================================
# S3-compatible storage backends that uploaded files are assigned to.
# Secret keys are write-only: they are accepted on create/update and never
# returned.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from lib.utils import mask_secret, utcnow


class StorageProvider(str, Enum):
    """Known S3-compatible providers."""
    AWS_S3 = "AWS S3"
    CLOUDFLARE_R2 = "Cloudflare R2"
    BACKBLAZE_B2 = "Backblaze B2"
    OTHER = "Other"


class StorageConfigCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
    provider_type: StorageProvider = StorageProvider.OTHER
    endpoint_url: str = Field(..., min_length=1)
    bucket_name: str = Field(..., min_length=1)
    region: str | None = None
    access_key_id: str = Field(..., min_length=1)
    secret_access_key: str = Field(..., min_length=1)
    path_style: bool = False
    default_folder: str = ""
    is_public: bool = False


class StorageConfigUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=64)
    provider_type: StorageProvider | None = None
    endpoint_url: str | None = Field(default=None, min_length=1)
    bucket_name: str | None = Field(default=None, min_length=1)
    region: str | None = None
    access_key_id: str | None = Field(default=None, min_length=1)
    secret_access_key: str | None = Field(default=None, min_length=1)
    path_style: bool | None = None
    default_folder: str | None = None
    is_public: bool | None = None


class StorageConfigRecord(StorageConfigCreate):
    id: str
    is_default: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class StorageConfigResponse(BaseModel):
    """Storage config as returned to clients; the secret is never included."""
    id: str
    name: str
    provider_type: StorageProvider
    endpoint_url: str
    bucket_name: str
    region: str | None
    access_key_id: str
    path_style: bool
    default_folder: str
    is_public: bool
    is_default: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: StorageConfigRecord) -> "StorageConfigResponse":
        data = record.model_dump(exclude={"secret_access_key"})
        data["access_key_id"] = mask_secret(record.access_key_id)
        return cls(**data)
