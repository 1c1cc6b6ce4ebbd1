# =============================================================================
# app/routers/admin.py - Admin Session Endpoints
# =============================================================================
# Login, logout, password change and token verification for the single
# administrator account.
# =============================================================================

import logging

from fastapi import APIRouter

from app.auth import AdminDep
from app.auth.models import ChangePasswordRequest, LoginRequest, LoginResponse
from app.dependencies import AdminSessionsDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"])


@router.post("/api/admin/login", response_model=LoginResponse)
async def login(body: LoginRequest, sessions: AdminSessionsDep):
    """
    Exchange admin credentials for a session token.

    Raises:
        401: If the username or password is wrong
    """
    return sessions.login(body.username, body.password)


@router.post("/api/admin/logout")
async def logout(admin: AdminDep, sessions: AdminSessionsDep) -> dict:
    """Revoke the presented session token."""
    sessions.revoke(admin)
    return {"message": "Logged out"}


@router.post("/api/admin/change-password")
async def change_password(
    body: ChangePasswordRequest,
    admin: AdminDep,
    sessions: AdminSessionsDep,
) -> dict:
    """
    Change the admin password. The current token stops working afterwards.

    Raises:
        400: If the current password is wrong
    """
    sessions.change_password(admin, body.current_password, body.new_password)
    return {"message": "Password changed, please log in again"}


@router.get("/api/test/admin-token")
async def verify_admin_token(admin: AdminDep) -> dict:
    """Check that a stored admin token is still valid."""
    return {
        "valid": True,
        "username": admin.username,
        "expires_at": admin.expires_at.isoformat(),
    }
