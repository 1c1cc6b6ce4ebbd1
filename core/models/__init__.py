# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - api_key.py: API key records and admin-facing schemas
# - paste.py: Paste create/read schemas
# - file.py: Uploaded file metadata schemas
# - storage_config.py: S3-compatible storage backend configuration
# - system.py: Runtime system settings and dashboard stats
#
# These models define the "contract" between API and clients.
# =============================================================================

from .api_key import ApiKeyCreate, ApiKeyRecord, ApiKeyResponse, ApiKeyUpdate
from .paste import (
    BatchDeleteRequest,
    PasteCreate,
    PasteRecord,
    PasteResponse,
    PasteSummary,
    PasteUnlockRequest,
)
from .file import FileRecord, FileResponse, FileUpdate
from .storage_config import (
    StorageConfigCreate,
    StorageConfigRecord,
    StorageConfigResponse,
    StorageConfigUpdate,
    StorageProvider,
)
from .system import DashboardStats, SystemSettings, SystemSettingsUpdate

__all__ = [
    # API keys
    "ApiKeyCreate",
    "ApiKeyRecord",
    "ApiKeyResponse",
    "ApiKeyUpdate",
    # Pastes
    "BatchDeleteRequest",
    "PasteCreate",
    "PasteRecord",
    "PasteResponse",
    "PasteSummary",
    "PasteUnlockRequest",
    # Files
    "FileRecord",
    "FileResponse",
    "FileUpdate",
    # Storage configs
    "StorageConfigCreate",
    "StorageConfigRecord",
    "StorageConfigResponse",
    "StorageConfigUpdate",
    "StorageProvider",
    # System
    "DashboardStats",
    "SystemSettings",
    "SystemSettingsUpdate",
]
