# =============================================================================
# core/services/storage_config_service.py - Storage Backend Configurations
# =============================================================================

import logging
from uuid import uuid4

from app.exceptions import ConflictError, ResourceNotFoundError
from core.models.storage_config import StorageConfigCreate, StorageConfigRecord, StorageConfigUpdate
from core.services.file_service import FileService
from lib.utils import utcnow

logger = logging.getLogger(__name__)


class StorageConfigService:
    """
    Service for S3-compatible storage configurations.

    Exactly one config is the default once any exist; the first one created
    becomes the default.
    """

    def __init__(self, files: FileService):
        self._configs: dict[str, StorageConfigRecord] = {}
        self._files = files

    def list_configs(self, public_only: bool = False) -> list[StorageConfigRecord]:
        configs = [c for c in self._configs.values() if c.is_public or not public_only]
        return sorted(configs, key=lambda c: c.created_at)

    def get_config(self, config_id: str) -> StorageConfigRecord:
        record = self._configs.get(config_id)
        if record is None:
            raise ResourceNotFoundError("Storage config", config_id)
        return record

    def get_default(self) -> StorageConfigRecord | None:
        for record in self._configs.values():
            if record.is_default:
                return record
        return None

    def create_config(self, data: StorageConfigCreate) -> StorageConfigRecord:
        record = StorageConfigRecord(
            id=str(uuid4()),
            is_default=not self._configs,
            **data.model_dump(),
        )
        self._configs[record.id] = record
        logger.info(f"Created storage config {record.id} ({record.name})")
        return record

    def update_config(self, config_id: str, data: StorageConfigUpdate) -> StorageConfigRecord:
        record = self.get_config(config_id)
        changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        updated = record.model_copy(update={**changes, "updated_at": utcnow()})
        self._configs[config_id] = updated
        return updated

    def delete_config(self, config_id: str) -> None:
        """
        Delete a config.

        Raises:
            ConflictError: If stored files still reference it
        """
        record = self.get_config(config_id)
        in_use = self._files.count_by_storage_config(config_id)
        if in_use:
            raise ConflictError(
                f"Storage config is used by {in_use} file(s)",
                details={"id": config_id, "file_count": in_use},
            )

        del self._configs[config_id]
        if record.is_default and self._configs:
            oldest = min(self._configs.values(), key=lambda c: c.created_at)
            oldest.is_default = True
        logger.info(f"Deleted storage config {config_id}")

    def set_default(self, config_id: str) -> StorageConfigRecord:
        target = self.get_config(config_id)
        for record in self._configs.values():
            record.is_default = record.id == target.id
        return target

    def count(self) -> int:
        return len(self._configs)
