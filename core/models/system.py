# =============================================================================
# core/models/system.py - System Settings Schemas
# =============================================================================

from pydantic import BaseModel, Field


class SystemSettings(BaseModel):
    """Runtime-adjustable settings."""
    max_upload_size_mb: int = Field(..., ge=1, le=1024)


class SystemSettingsUpdate(BaseModel):
    max_upload_size_mb: int | None = Field(default=None, ge=1, le=1024)


class DashboardStats(BaseModel):
    total_pastes: int
    total_files: int
    total_api_keys: int
    total_storage_configs: int
    total_storage_bytes: int
