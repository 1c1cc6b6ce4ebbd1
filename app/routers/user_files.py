# =============================================================================
# app/routers/user_files.py - API-Key User File Management
# =============================================================================
# Routes under /api/user/files, gated by the API-key gate. Users only see
# files uploaded with their own key; other files are reported as missing.
# =============================================================================

from fastapi import APIRouter, FastAPI

from app.auth import GatedApiKeyDep
from app.dependencies import FileServiceDep
from core.models.file import FileResponse, FileUpdate

USER_FILES_PREFIX = "/api/user/files"

router = APIRouter(prefix=USER_FILES_PREFIX, tags=["User Files"])


@router.get("", response_model=list[FileResponse])
async def list_own_files(api_key: GatedApiKeyDep, files: FileServiceDep):
    return [FileResponse.from_record(f) for f in files.list_files(created_by=api_key.principal)]


@router.get("/{file_id}", response_model=FileResponse)
async def get_own_file(file_id: str, api_key: GatedApiKeyDep, files: FileServiceDep):
    return FileResponse.from_record(files.get_file(file_id, created_by=api_key.principal))


@router.put("/{file_id}", response_model=FileResponse)
async def update_own_file(
    file_id: str,
    body: FileUpdate,
    api_key: GatedApiKeyDep,
    files: FileServiceDep,
):
    return FileResponse.from_record(files.update_file(file_id, body, created_by=api_key.principal))


@router.delete("/{file_id}")
async def delete_own_file(file_id: str, api_key: GatedApiKeyDep, files: FileServiceDep) -> dict:
    files.delete_file(file_id, created_by=api_key.principal)
    return {"message": "File deleted", "id": file_id}


def register_user_files_routes(app: FastAPI) -> None:
    app.include_router(router)
