# =============================================================================
# app/routers/upload.py - File Upload Endpoint
# =============================================================================
# Handles multipart uploads from admins and API keys with file permission.
# Registered on the application through register_upload_routes().
# =============================================================================

import logging
from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, FastAPI, File, Form, UploadFile, status

from app.auth import FilePrincipalDep
from app.dependencies import FileServiceDep, StorageConfigServiceDep, SystemServiceDep
from app.exceptions import BadRequestError, PayloadTooLargeError
from core.models.file import FileResponse
from core.models.paste import SLUG_PATTERN
from lib.utils import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Upload"])

UPLOAD_CHUNK_SIZE = 1024 * 1024


@router.post("/api/upload", response_model=FileResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: Annotated[UploadFile, File(description="File to share")],
    principal: FilePrincipalDep,
    files: FileServiceDep,
    storage_configs: StorageConfigServiceDep,
    system: SystemServiceDep,
    slug: Annotated[str | None, Form(pattern=SLUG_PATTERN)] = None,
    remark: Annotated[str | None, Form(max_length=255)] = None,
    password: Annotated[str | None, Form(max_length=128)] = None,
    expires_in_hours: Annotated[int | None, Form(ge=1)] = None,
    max_views: Annotated[int | None, Form(ge=1)] = None,
    storage_config_id: Annotated[str | None, Form()] = None,
):
    """
    Upload a file to share.

    This endpoint:
    1. Validates the file (non-empty, within the system size limit)
    2. Resolves the storage config (explicit, else the default)
    3. Stores the file and returns its metadata

    Raises:
        400: Empty file
        404: Unknown storage config
        409: Slug already in use
        413: File over the size limit
    """
    # =============================================================================
    # 1. Validate File
    # =============================================================================

    filename = file.filename or "upload.bin"
    limit = system.max_upload_size_bytes
    content = await _read_within_limit(file, limit)

    if content is None:
        # Size is the declared size when the client sent one, else a lower bound
        size_bytes = file.size or limit + 1
        raise PayloadTooLargeError(
            size_bytes / (1024 * 1024), system.get_settings().max_upload_size_mb
        )

    size_bytes = len(content)
    if size_bytes == 0:
        raise BadRequestError(f"Uploaded file is empty: {filename}")

    # =============================================================================
    # 2. Resolve Storage Config
    # =============================================================================

    if storage_config_id:
        config_id = storage_configs.get_config(storage_config_id).id
    else:
        default = storage_configs.get_default()
        config_id = default.id if default else None

    # =============================================================================
    # 3. Store
    # =============================================================================

    expires_at = utcnow() + timedelta(hours=expires_in_hours) if expires_in_hours else None
    record = files.store_file(
        content,
        filename=filename,
        created_by=principal.principal,
        mimetype=file.content_type,
        slug=slug,
        remark=remark,
        password=password or None,
        expires_at=expires_at,
        max_views=max_views,
        storage_config_id=config_id,
    )

    logger.info(f"Upload by {principal.principal}: {filename} ({size_bytes} bytes)")
    return FileResponse.from_record(record)


async def _read_within_limit(file: UploadFile, limit: int) -> bytes | None:
    """
    Read an upload in chunks, giving up once it exceeds `limit` bytes.

    Returns None for oversized files, so they are never held in memory whole.
    """
    if file.size is not None and file.size > limit:
        return None

    chunks = []
    total = 0
    while chunk := await file.read(UPLOAD_CHUNK_SIZE):
        total += len(chunk)
        if total > limit:
            return None
        chunks.append(chunk)
    return b"".join(chunks)


def register_upload_routes(app: FastAPI) -> None:
    app.include_router(router)
