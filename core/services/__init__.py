# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .api_key_service import ApiKeyService
from .paste_service import PasteService
from .file_service import FileService
from .storage_config_service import StorageConfigService
from .system_service import SystemSettingsService

__all__ = [
    "ApiKeyService",
    "PasteService",
    "FileService",
    "StorageConfigService",
    "SystemSettingsService",
]
