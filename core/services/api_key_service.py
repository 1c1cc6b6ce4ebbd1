# =============================================================================
# core/services/api_key_service.py - API Key Management
# =============================================================================
# Handles API key CRUD and lookup by key value.
# =============================================================================

import logging
from uuid import uuid4

from app.exceptions import ConflictError, ResourceNotFoundError
from core.models.api_key import ApiKeyCreate, ApiKeyRecord, ApiKeyUpdate
from lib.utils import generate_api_key, utcnow

logger = logging.getLogger(__name__)


class ApiKeyService:
    """
    Service for API key operations.

    Keys are held in process memory for the lifetime of the application.
    """

    def __init__(self):
        self._keys: dict[str, ApiKeyRecord] = {}

    def list_keys(self) -> list[ApiKeyRecord]:
        return sorted(self._keys.values(), key=lambda k: k.created_at, reverse=True)

    def get_key(self, key_id: str) -> ApiKeyRecord:
        record = self._keys.get(key_id)
        if record is None:
            raise ResourceNotFoundError("API key", key_id)
        return record

    def create_key(self, data: ApiKeyCreate) -> ApiKeyRecord:
        """
        Create a new API key.

        Raises:
            ConflictError: If another key already uses the name
        """
        self._ensure_name_free(data.name)
        record = ApiKeyRecord(id=str(uuid4()), key=generate_api_key(), **data.model_dump())
        self._keys[record.id] = record
        logger.info(f"Created API key {record.id} ({record.name})")
        return record

    def update_key(self, key_id: str, data: ApiKeyUpdate) -> ApiKeyRecord:
        record = self.get_key(key_id)
        # An explicit null only clears the expiry
        changes = {
            k: v for k, v in data.model_dump(exclude_unset=True).items()
            if v is not None or k == "expires_at"
        }

        if changes.get("name") and changes["name"] != record.name:
            self._ensure_name_free(changes["name"])

        updated = record.model_copy(update=changes)
        self._keys[key_id] = updated
        logger.info(f"Updated API key {key_id}: {sorted(changes)}")
        return updated

    def delete_key(self, key_id: str) -> None:
        self.get_key(key_id)
        del self._keys[key_id]
        logger.info(f"Deleted API key {key_id}")

    def find_by_value(self, key: str) -> ApiKeyRecord | None:
        """Look up a key by its secret value. Returns None when unknown."""
        for record in self._keys.values():
            if record.key == key:
                return record
        return None

    def touch(self, record: ApiKeyRecord) -> None:
        """Record that a key was just used."""
        record.last_used = utcnow()

    def count(self) -> int:
        return len(self._keys)

    def _ensure_name_free(self, name: str) -> None:
        if any(k.name == name for k in self._keys.values()):
            raise ConflictError(f"API key name already exists: {name}")
