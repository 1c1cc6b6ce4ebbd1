# =============================================================================
# core/services/paste_service.py - Paste Business Logic
# =============================================================================
# Handles paste CRUD, access rules (password, expiry, view limits) and view
# counting. Separates HTTP concerns from storage/business logic.
# =============================================================================

import logging
from uuid import uuid4

from app.exceptions import ConflictError, ForbiddenError, GoneError, ResourceNotFoundError
from core.models.paste import PasteCreate, PasteRecord
from lib.utils import generate_slug, hash_password, verify_password

logger = logging.getLogger(__name__)


class PasteService:
    """Service for paste operations."""

    def __init__(self):
        self._pastes: dict[str, PasteRecord] = {}

    def create_paste(self, data: PasteCreate, created_by: str) -> PasteRecord:
        """
        Create a paste.

        Args:
            data: Validated paste input
            created_by: Principal label, e.g. "admin:root" or "apikey:<id>"

        Raises:
            ConflictError: If the requested slug is taken
        """
        if data.slug and self._find_by_slug(data.slug):
            raise ConflictError(f"Slug already in use: {data.slug}")

        slug = data.slug or self._unique_slug()
        record = PasteRecord(
            id=str(uuid4()),
            slug=slug,
            content=data.content,
            remark=data.remark,
            password_hash=hash_password(data.password) if data.password else None,
            expires_at=data.expires_at,
            max_views=data.max_views,
            created_by=created_by,
        )
        self._pastes[record.id] = record
        logger.info(f"Created paste {slug} by {created_by}")
        return record

    def list_pastes(self, created_by: str | None = None) -> list[PasteRecord]:
        pastes = [
            p for p in self._pastes.values()
            if created_by is None or p.created_by == created_by
        ]
        return sorted(pastes, key=lambda p: p.created_at, reverse=True)

    def get_paste(self, paste_id: str) -> PasteRecord:
        record = self._pastes.get(paste_id)
        if record is None:
            raise ResourceNotFoundError("Paste", paste_id)
        return record

    def get_by_slug(self, slug: str, created_by: str | None = None) -> PasteRecord:
        record = self._find_by_slug(slug)
        if record is None or (created_by is not None and record.created_by != created_by):
            raise ResourceNotFoundError("Paste", slug)
        return record

    def open_paste(self, slug: str, password: str | None = None) -> PasteRecord:
        """
        Read a paste as a visitor and count the view.

        Raises:
            ResourceNotFoundError: Unknown slug
            GoneError: Expired or out of views
            ForbiddenError: Password missing or wrong
        """
        record = self.get_by_slug(slug)

        if record.is_expired():
            raise GoneError("Paste has expired")

        if record.has_password:
            if password is None:
                raise ForbiddenError("This paste is password protected", code="PASSWORD_REQUIRED")
            if not verify_password(password, record.password_hash):
                raise ForbiddenError("Incorrect password", code="PASSWORD_INCORRECT")

        record.views += 1
        return record

    def delete_paste(self, paste_id: str) -> None:
        self.get_paste(paste_id)
        del self._pastes[paste_id]
        logger.info(f"Deleted paste {paste_id}")

    def delete_many(self, paste_ids: list[str]) -> int:
        deleted = 0
        for paste_id in paste_ids:
            if self._pastes.pop(paste_id, None) is not None:
                deleted += 1
        logger.info(f"Batch deleted {deleted} of {len(paste_ids)} pastes")
        return deleted

    def clear_expired(self) -> int:
        expired = [p.id for p in self._pastes.values() if p.is_expired()]
        for paste_id in expired:
            del self._pastes[paste_id]
        if expired:
            logger.info(f"Cleared {len(expired)} expired pastes")
        return len(expired)

    def count(self) -> int:
        return len(self._pastes)

    def _find_by_slug(self, slug: str) -> PasteRecord | None:
        for record in self._pastes.values():
            if record.slug == slug:
                return record
        return None

    def _unique_slug(self) -> str:
        while True:
            slug = generate_slug()
            if self._find_by_slug(slug) is None:
                return slug
