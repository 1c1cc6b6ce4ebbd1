# =============================================================================
# app/routers/storage_configs.py - Storage Backend Configuration Endpoints
# =============================================================================
# Admins manage S3-compatible storage configs. API-key users may list the
# configs marked public so they can pick one when uploading.
# =============================================================================

from fastapi import APIRouter, status

from app.auth import AdminDep, AdminIdentity, FilePrincipalDep
from app.dependencies import StorageConfigServiceDep
from core.models.storage_config import (
    StorageConfigCreate,
    StorageConfigResponse,
    StorageConfigUpdate,
)

router = APIRouter(prefix="/api/s3-configs", tags=["Storage Configs"])


@router.get("", response_model=list[StorageConfigResponse])
async def list_storage_configs(principal: FilePrincipalDep, service: StorageConfigServiceDep):
    """
    List storage configs.

    Admins see every config; API keys with file permission see public ones.
    """
    public_only = not isinstance(principal, AdminIdentity)
    return [StorageConfigResponse.from_record(c) for c in service.list_configs(public_only=public_only)]


@router.get("/{config_id}", response_model=StorageConfigResponse)
async def get_storage_config(config_id: str, admin: AdminDep, service: StorageConfigServiceDep):
    return StorageConfigResponse.from_record(service.get_config(config_id))


@router.post("", response_model=StorageConfigResponse, status_code=status.HTTP_201_CREATED)
async def create_storage_config(
    body: StorageConfigCreate,
    admin: AdminDep,
    service: StorageConfigServiceDep,
):
    return StorageConfigResponse.from_record(service.create_config(body))


@router.put("/{config_id}", response_model=StorageConfigResponse)
async def update_storage_config(
    config_id: str,
    body: StorageConfigUpdate,
    admin: AdminDep,
    service: StorageConfigServiceDep,
):
    return StorageConfigResponse.from_record(service.update_config(config_id, body))


@router.delete("/{config_id}")
async def delete_storage_config(config_id: str, admin: AdminDep, service: StorageConfigServiceDep) -> dict:
    """
    Raises:
        409: If uploaded files still use the config
    """
    service.delete_config(config_id)
    return {"message": "Storage config deleted", "id": config_id}


@router.put("/{config_id}/set-default", response_model=StorageConfigResponse)
async def set_default_storage_config(
    config_id: str,
    admin: AdminDep,
    service: StorageConfigServiceDep,
):
    return StorageConfigResponse.from_record(service.set_default(config_id))
