# =============================================================================
# app/routers/admin_files.py - Admin File Management
# =============================================================================
# Every route here lives under /api/admin/files, which the dispatcher gates
# with the admin session gate. Handlers read the verified identity from
# the request state.
# =============================================================================

from fastapi import APIRouter, FastAPI

from app.auth import GatedAdminDep
from app.dependencies import FileServiceDep
from core.models.file import FileResponse, FileUpdate

ADMIN_FILES_PREFIX = "/api/admin/files"

router = APIRouter(prefix=ADMIN_FILES_PREFIX, tags=["Admin Files"])


@router.get("", response_model=list[FileResponse])
async def list_files(admin: GatedAdminDep, files: FileServiceDep):
    return [FileResponse.from_record(f) for f in files.list_files()]


@router.get("/{file_id}", response_model=FileResponse)
async def get_file(file_id: str, admin: GatedAdminDep, files: FileServiceDep):
    return FileResponse.from_record(files.get_file(file_id))


@router.put("/{file_id}", response_model=FileResponse)
async def update_file(file_id: str, body: FileUpdate, admin: GatedAdminDep, files: FileServiceDep):
    return FileResponse.from_record(files.update_file(file_id, body))


@router.delete("/{file_id}")
async def delete_file(file_id: str, admin: GatedAdminDep, files: FileServiceDep) -> dict:
    files.delete_file(file_id)
    return {"message": "File deleted", "id": file_id}


def register_admin_files_routes(app: FastAPI) -> None:
    app.include_router(router)
