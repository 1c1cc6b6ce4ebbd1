# =============================================================================
# app/routers/api_keys.py - API Key Management Endpoints
# =============================================================================

from fastapi import APIRouter, status

from app.auth import AdminDep, ApiKeyDep
from app.dependencies import ApiKeyServiceDep
from core.models.api_key import ApiKeyCreate, ApiKeyResponse, ApiKeyUpdate

router = APIRouter(tags=["API Keys"])


@router.get("/api/admin/api-keys", response_model=list[ApiKeyResponse])
async def list_api_keys(admin: AdminDep, service: ApiKeyServiceDep):
    """List all API keys with their key values masked."""
    return [ApiKeyResponse.from_record(record) for record in service.list_keys()]


@router.post(
    "/api/admin/api-keys",
    response_model=ApiKeyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_api_key(body: ApiKeyCreate, admin: AdminDep, service: ApiKeyServiceDep):
    """
    Create an API key.

    The full key value is only returned here; store it on the client.
    """
    return ApiKeyResponse.from_record(service.create_key(body), reveal=True)


@router.put("/api/admin/api-keys/{key_id}", response_model=ApiKeyResponse)
async def update_api_key(
    key_id: str,
    body: ApiKeyUpdate,
    admin: AdminDep,
    service: ApiKeyServiceDep,
):
    return ApiKeyResponse.from_record(service.update_key(key_id, body))


@router.delete("/api/admin/api-keys/{key_id}")
async def delete_api_key(key_id: str, admin: AdminDep, service: ApiKeyServiceDep) -> dict:
    service.delete_key(key_id)
    return {"message": "API key deleted", "id": key_id}


@router.get("/api/test/api-key")
async def verify_api_key(api_key: ApiKeyDep) -> dict:
    """Check that an API key is valid and report its permissions."""
    return {
        "valid": True,
        "name": api_key.name,
        "permissions": {
            "text": api_key.text_permission,
            "file": api_key.file_permission,
        },
    }
