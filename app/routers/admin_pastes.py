# =============================================================================
# app/routers/admin_pastes.py - Paste Administration Endpoints
# =============================================================================
# Admin-only paste management. Credentials are checked per route through
# AdminDep; this namespace is not covered by a dispatcher-level gate.
# =============================================================================

from fastapi import APIRouter

from app.auth import AdminDep
from app.dependencies import PasteServiceDep
from app.exceptions import BadRequestError
from core.models.paste import BatchDeleteRequest, PasteResponse, PasteSummary

router = APIRouter(tags=["Admin Pastes"])


@router.get("/api/admin/pastes", response_model=list[PasteSummary])
async def list_pastes(admin: AdminDep, service: PasteServiceDep):
    return [PasteSummary.from_record(p) for p in service.list_pastes()]


@router.get("/api/admin/pastes/{paste_id}", response_model=PasteResponse)
async def get_paste(paste_id: str, admin: AdminDep, service: PasteServiceDep):
    """Full paste, bypassing password and view-limit checks."""
    return PasteResponse.from_record(service.get_paste(paste_id))


@router.delete("/api/admin/pastes/{paste_id}")
async def delete_paste(paste_id: str, admin: AdminDep, service: PasteServiceDep) -> dict:
    service.delete_paste(paste_id)
    return {"message": "Paste deleted", "id": paste_id}


@router.post("/api/admin/pastes/batch-delete")
async def batch_delete_pastes(
    body: BatchDeleteRequest,
    admin: AdminDep,
    service: PasteServiceDep,
) -> dict:
    if not body.ids:
        raise BadRequestError("Provide at least one paste id")
    return {"deleted": service.delete_many(body.ids)}


@router.post("/api/admin/pastes/clear-expired")
async def clear_expired_pastes(admin: AdminDep, service: PasteServiceDep) -> dict:
    return {"deleted": service.clear_expired()}
