# =============================================================================
# core/services/system_service.py - Runtime System Settings
# =============================================================================

import logging

from core.models.system import SystemSettings, SystemSettingsUpdate

logger = logging.getLogger(__name__)


class SystemSettingsService:
    """Holds settings admins can change while the service runs."""

    def __init__(self, max_upload_size_mb: int):
        self._settings = SystemSettings(max_upload_size_mb=max_upload_size_mb)

    def get_settings(self) -> SystemSettings:
        return self._settings

    def update_settings(self, data: SystemSettingsUpdate) -> SystemSettings:
        changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        self._settings = self._settings.model_copy(update=changes)
        logger.info(f"System settings updated: {changes}")
        return self._settings

    @property
    def max_upload_size_bytes(self) -> int:
        return self._settings.max_upload_size_mb * 1024 * 1024
