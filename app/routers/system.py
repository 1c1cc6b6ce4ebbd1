# =============================================================================
# app/routers/system.py - System Settings and Dashboard Endpoints
# =============================================================================

from fastapi import APIRouter

from app.auth import AdminDep
from app.dependencies import (
    ApiKeyServiceDep,
    FileServiceDep,
    PasteServiceDep,
    StorageConfigServiceDep,
    SystemServiceDep,
)
from core.models.system import DashboardStats, SystemSettings, SystemSettingsUpdate

router = APIRouter(tags=["System"])


@router.get("/api/system/max-upload-size")
async def get_max_upload_size(system: SystemServiceDep) -> dict:
    """Public: lets clients check file sizes before uploading."""
    return {"max_upload_size_mb": system.get_settings().max_upload_size_mb}


@router.get("/api/admin/system-settings", response_model=SystemSettings)
async def get_system_settings(admin: AdminDep, system: SystemServiceDep):
    return system.get_settings()


@router.put("/api/admin/system-settings", response_model=SystemSettings)
async def update_system_settings(
    body: SystemSettingsUpdate,
    admin: AdminDep,
    system: SystemServiceDep,
):
    return system.update_settings(body)


@router.get("/api/admin/dashboard/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    admin: AdminDep,
    pastes: PasteServiceDep,
    files: FileServiceDep,
    api_keys: ApiKeyServiceDep,
    storage_configs: StorageConfigServiceDep,
):
    return DashboardStats(
        total_pastes=pastes.count(),
        total_files=files.count(),
        total_api_keys=api_keys.count(),
        total_storage_configs=storage_configs.count(),
        total_storage_bytes=files.total_bytes(),
    )
