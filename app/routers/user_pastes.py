# =============================================================================
# app/routers/user_pastes.py - Paste Sharing Endpoints
# =============================================================================
# Creating a paste needs an admin session or an API key with text
# permission. Reading a paste by slug is public, subject to its password,
# expiry and view limit.
# =============================================================================

import logging

from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from app.auth import ApiKeyDep, TextPrincipalDep
from app.dependencies import PasteServiceDep
from core.models.paste import PasteCreate, PasteResponse, PasteSummary, PasteUnlockRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pastes"])


@router.post("/api/paste", response_model=PasteResponse, status_code=status.HTTP_201_CREATED)
async def create_paste(body: PasteCreate, principal: TextPrincipalDep, service: PasteServiceDep):
    """
    Create a paste.

    A slug is generated when none is given.

    Raises:
        401: No valid credentials
        403: API key without text permission
        409: Slug already in use
    """
    record = service.create_paste(body, created_by=principal.principal)
    return PasteResponse.from_record(record)


@router.get("/api/paste/{slug}", response_model=PasteResponse)
async def get_paste(slug: str, service: PasteServiceDep):
    """
    Read a paste and count one view.

    Password-protected pastes answer 403 with code PASSWORD_REQUIRED;
    unlock them with POST /api/paste/{slug}.
    """
    return PasteResponse.from_record(service.open_paste(slug))


@router.post("/api/paste/{slug}", response_model=PasteResponse)
async def unlock_paste(slug: str, body: PasteUnlockRequest, service: PasteServiceDep):
    return PasteResponse.from_record(service.open_paste(slug, body.password))


@router.get("/api/raw/{slug}", response_class=PlainTextResponse)
async def get_raw_paste(
    slug: str,
    service: PasteServiceDep,
    password: str | None = Query(default=None),
):
    return PlainTextResponse(service.open_paste(slug, password).content)


@router.get("/api/user/pastes", response_model=list[PasteSummary])
async def list_own_pastes(api_key: ApiKeyDep, service: PasteServiceDep):
    """Pastes created with the presented API key."""
    return [PasteSummary.from_record(p) for p in service.list_pastes(created_by=api_key.principal)]


@router.delete("/api/user/pastes/{slug}")
async def delete_own_paste(slug: str, api_key: ApiKeyDep, service: PasteServiceDep) -> dict:
    record = service.get_by_slug(slug, created_by=api_key.principal)
    service.delete_paste(record.id)
    return {"message": "Paste deleted", "slug": slug}
