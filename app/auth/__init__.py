# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Admin session tokens (JWT) and end-user API keys.
#
# Usage:
#   from app.auth import AdminDep, AdminIdentity
#
#   @router.get("/protected")
#   async def protected(admin: AdminDep):
#       return {"username": admin.username}
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.auth.dependencies import (
    Principal,
    get_current_admin,
    get_current_api_key,
    get_file_principal,
    get_gated_admin,
    get_gated_api_key,
    get_text_principal,
    require_admin_session,
    require_file_api_key,
)
from app.auth.models import AdminIdentity, ApiKeyContext
from app.auth.tokens import AdminSessionManager

# Type aliases for dependency injection
AdminDep = Annotated[AdminIdentity, Depends(get_current_admin)]
ApiKeyDep = Annotated[ApiKeyContext, Depends(get_current_api_key)]
TextPrincipalDep = Annotated[Principal, Depends(get_text_principal)]
FilePrincipalDep = Annotated[Principal, Depends(get_file_principal)]
GatedAdminDep = Annotated[AdminIdentity, Depends(get_gated_admin)]
GatedApiKeyDep = Annotated[ApiKeyContext, Depends(get_gated_api_key)]

__all__ = [
    "AdminDep",
    "AdminIdentity",
    "AdminSessionManager",
    "ApiKeyContext",
    "ApiKeyDep",
    "FilePrincipalDep",
    "GatedAdminDep",
    "GatedApiKeyDep",
    "Principal",
    "TextPrincipalDep",
    "require_admin_session",
    "require_file_api_key",
]
