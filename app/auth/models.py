# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for admin sessions and API-key credential contexts.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AdminIdentity(BaseModel):
    """
    Authenticated administrator extracted from a session token.

    Attached to `request.state.admin` by the admin-files gate.
    """
    model_config = ConfigDict(frozen=True)

    username: str
    token_id: str
    expires_at: datetime

    @property
    def principal(self) -> str:
        return f"admin:{self.username}"


class ApiKeyContext(BaseModel):
    """
    Verified API key.

    Attached to `request.state.api_key` by the user-files gate.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    text_permission: bool
    file_permission: bool

    @property
    def principal(self) -> str:
        return f"apikey:{self.id}"


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    token: str
    username: str
    expires_at: datetime


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=128)
