# =============================================================================
# app/auth/dependencies.py - Credential Gates and Auth Dependencies
# =============================================================================
# Two kinds of credentials are accepted:
#
# - Admin session:  Authorization: Bearer <jwt>
# - API key:        X-API-KEY: <key>   (or Authorization: ApiKey <key>)
#
# The gate functions (require_admin_session, require_file_api_key) are run
# by PathGateMiddleware for the file namespaces. Every other route group
# checks credentials itself through the FastAPI dependencies below.
#
# Usage:
#   from app.auth import AdminDep
#
#   @router.get("/api/admin/things")
#   async def list_things(admin: AdminDep):
#       return {"username": admin.username}
# =============================================================================

import logging

from fastapi import Request

from app.auth.models import AdminIdentity, ApiKeyContext
from app.auth.tokens import AdminSessionManager
from app.exceptions import ForbiddenError, UnauthorizedError
from core.services.api_key_service import ApiKeyService

logger = logging.getLogger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

Principal = AdminIdentity | ApiKeyContext


# =============================================================================
# Credential Extraction
# =============================================================================

def _authorization(request: Request, scheme: str) -> str | None:
    header = request.headers.get("Authorization", "")
    given, _, value = header.partition(" ")
    if given.lower() == scheme and value.strip():
        return value.strip()
    return None


def extract_bearer_token(request: Request) -> str | None:
    return _authorization(request, "bearer")


def extract_api_key(request: Request) -> str | None:
    """Read the API key from the configured header, falling back to `Authorization: ApiKey`."""
    header_name = request.app.state.settings.API_KEY_HEADER
    value = request.headers.get(header_name, "").strip()
    return value or _authorization(request, "apikey")


# =============================================================================
# Verification
# =============================================================================

async def require_admin_session(request: Request) -> AdminIdentity:
    """
    Admin credential gate.

    Raises:
        UnauthorizedError: 401 if the bearer token is missing or invalid
    """
    token = extract_bearer_token(request)
    if token is None:
        raise UnauthorizedError("Admin authentication required", headers=BEARER_CHALLENGE)

    sessions: AdminSessionManager = request.app.state.admin_sessions
    return sessions.verify(token)


def verify_api_key(request: Request, permission: str | None = None) -> ApiKeyContext:
    """
    Verify the request's API key, optionally requiring a permission.

    Args:
        permission: "text", "file" or None for any valid key

    Raises:
        UnauthorizedError: 401 if the key is missing, unknown or expired
        ForbiddenError: 403 if the key lacks the permission
    """
    key = extract_api_key(request)
    if key is None:
        raise UnauthorizedError("API key required")

    service: ApiKeyService = request.app.state.api_keys
    record = service.find_by_value(key)
    if record is None or record.is_expired():
        logger.warning(f"Rejected API key on {request.url.path}")
        raise UnauthorizedError("Invalid or expired API key")

    if permission and not getattr(record, f"{permission}_permission"):
        raise ForbiddenError(f"API key does not have {permission} permission")

    service.touch(record)
    return ApiKeyContext(
        id=record.id,
        name=record.name,
        text_permission=record.text_permission,
        file_permission=record.file_permission,
    )


async def require_file_api_key(request: Request) -> ApiKeyContext:
    """API-key credential gate for the user file namespace."""
    return verify_api_key(request, "file")


# =============================================================================
# FastAPI Dependencies
# =============================================================================

async def get_current_admin(request: Request) -> AdminIdentity:
    """Self-check dependency for admin-only routes."""
    return await require_admin_session(request)


async def get_current_api_key(request: Request) -> ApiKeyContext:
    """Any valid API key, regardless of permissions."""
    return verify_api_key(request)


def _admin_or_api_key(permission: str):
    async def dependency(request: Request) -> Principal:
        # A bearer token means the caller claims to be an admin; no fallback
        if extract_bearer_token(request) is not None:
            return await require_admin_session(request)
        return verify_api_key(request, permission)

    return dependency


get_text_principal = _admin_or_api_key("text")
get_file_principal = _admin_or_api_key("file")


async def get_gated_admin(request: Request) -> AdminIdentity:
    """Admin identity left on the request by the admin-files gate."""
    identity = getattr(request.state, "admin", None)
    if identity is None:
        raise UnauthorizedError("Admin authentication required", headers=BEARER_CHALLENGE)
    return identity


async def get_gated_api_key(request: Request) -> ApiKeyContext:
    """API key context left on the request by the user-files gate."""
    context = getattr(request.state, "api_key", None)
    if context is None:
        raise UnauthorizedError("API key required")
    return context
