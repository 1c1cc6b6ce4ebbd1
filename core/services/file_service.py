# =============================================================================
# core/services/file_service.py - Shared File Operations
# =============================================================================
# Stores uploaded file bytes and metadata, enforces owner scoping for
# API-key users, and applies the same access rules as pastes when files are
# viewed by slug.
# =============================================================================

import logging
from uuid import uuid4

from app.exceptions import ConflictError, ForbiddenError, GoneError, ResourceNotFoundError
from core.models.file import FileRecord, FileUpdate
from lib.utils import generate_slug, hash_password, verify_password

logger = logging.getLogger(__name__)


class FileService:
    """Service for uploaded files."""

    def __init__(self):
        self._files: dict[str, FileRecord] = {}
        self._blobs: dict[str, bytes] = {}

    def store_file(
        self,
        content: bytes,
        filename: str,
        created_by: str,
        mimetype: str | None = None,
        slug: str | None = None,
        remark: str | None = None,
        password: str | None = None,
        expires_at=None,
        max_views: int | None = None,
        storage_config_id: str | None = None,
    ) -> FileRecord:
        """
        Store a file and its metadata.

        Returns:
            The created FileRecord

        Raises:
            ConflictError: If the requested slug is taken
        """
        if slug and self._find_by_slug(slug):
            raise ConflictError(f"Slug already in use: {slug}")

        record = FileRecord(
            id=str(uuid4()),
            slug=slug or self._unique_slug(),
            filename=filename,
            mimetype=mimetype or "application/octet-stream",
            size=len(content),
            remark=remark,
            password_hash=hash_password(password) if password else None,
            expires_at=expires_at,
            max_views=max_views,
            storage_config_id=storage_config_id,
            created_by=created_by,
        )
        self._files[record.id] = record
        self._blobs[record.id] = content
        logger.info(f"Stored file {record.filename} ({record.size} bytes) as {record.slug}")
        return record

    def list_files(self, created_by: str | None = None) -> list[FileRecord]:
        files = [
            f for f in self._files.values()
            if created_by is None or f.created_by == created_by
        ]
        return sorted(files, key=lambda f: f.created_at, reverse=True)

    def get_file(self, file_id: str, created_by: str | None = None) -> FileRecord:
        """
        Fetch file metadata.

        When `created_by` is given, files owned by anyone else are reported
        as not found.
        """
        record = self._files.get(file_id)
        if record is None or (created_by is not None and record.created_by != created_by):
            raise ResourceNotFoundError("File", file_id)
        return record

    def update_file(self, file_id: str, data: FileUpdate, created_by: str | None = None) -> FileRecord:
        record = self.get_file(file_id, created_by)
        changes = data.model_dump(exclude_unset=True)

        new_slug = changes.get("slug")
        if new_slug and new_slug != record.slug and self._find_by_slug(new_slug):
            raise ConflictError(f"Slug already in use: {new_slug}")
        if new_slug is None:
            changes.pop("slug", None)

        if "password" in changes:
            password = changes.pop("password")
            changes["password_hash"] = hash_password(password) if password else None

        updated = record.model_copy(update=changes)
        self._files[file_id] = updated
        return updated

    def delete_file(self, file_id: str, created_by: str | None = None) -> None:
        self.get_file(file_id, created_by)
        del self._files[file_id]
        self._blobs.pop(file_id, None)
        logger.info(f"Deleted file {file_id}")

    def open_file(self, slug: str, password: str | None = None) -> tuple[FileRecord, bytes]:
        """
        Read a file as a visitor and count the view.

        Raises:
            ResourceNotFoundError: Unknown slug
            GoneError: Expired or out of views
            ForbiddenError: Password missing or wrong
        """
        record = self._find_by_slug(slug)
        if record is None:
            raise ResourceNotFoundError("File", slug)

        if record.is_expired():
            raise GoneError("File has expired")

        if record.has_password:
            if password is None:
                raise ForbiddenError("This file is password protected", code="PASSWORD_REQUIRED")
            if not verify_password(password, record.password_hash):
                raise ForbiddenError("Incorrect password", code="PASSWORD_INCORRECT")

        record.views += 1
        return record, self._blobs[record.id]

    def count(self) -> int:
        return len(self._files)

    def count_by_storage_config(self, config_id: str) -> int:
        return sum(1 for f in self._files.values() if f.storage_config_id == config_id)

    def total_bytes(self) -> int:
        return sum(f.size for f in self._files.values())

    def _find_by_slug(self, slug: str) -> FileRecord | None:
        for record in self._files.values():
            if record.slug == slug:
                return record
        return None

    def _unique_slug(self) -> str:
        while True:
            slug = generate_slug()
            if self._find_by_slug(slug) is None:
                return slug
