# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# Services are created once per application in create_app() and stored on
# app.state; these helpers hand them to route handlers via Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.auth.tokens import AdminSessionManager
from core.services import (
    ApiKeyService,
    FileService,
    PasteService,
    StorageConfigService,
    SystemSettingsService,
)


def get_admin_sessions(request: Request) -> AdminSessionManager:
    return request.app.state.admin_sessions


def get_api_key_service(request: Request) -> ApiKeyService:
    return request.app.state.api_keys


def get_paste_service(request: Request) -> PasteService:
    return request.app.state.pastes


def get_file_service(request: Request) -> FileService:
    return request.app.state.files


def get_storage_config_service(request: Request) -> StorageConfigService:
    return request.app.state.storage_configs


def get_system_service(request: Request) -> SystemSettingsService:
    return request.app.state.system


# Type aliases for dependency injection
AdminSessionsDep = Annotated[AdminSessionManager, Depends(get_admin_sessions)]
ApiKeyServiceDep = Annotated[ApiKeyService, Depends(get_api_key_service)]
PasteServiceDep = Annotated[PasteService, Depends(get_paste_service)]
FileServiceDep = Annotated[FileService, Depends(get_file_service)]
StorageConfigServiceDep = Annotated[StorageConfigService, Depends(get_storage_config_service)]
SystemServiceDep = Annotated[SystemSettingsService, Depends(get_system_service)]
