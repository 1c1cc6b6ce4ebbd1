# =============================================================================
# app/auth/tokens.py - Admin Session Tokens
# =============================================================================
# Admin sessions are HS256 JWTs signed with SECRET_KEY. Logging out (or
# changing the password) revokes a token by its `jti` claim.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from jose import ExpiredSignatureError, JWTError, jwt

from app.auth.models import AdminIdentity, LoginResponse
from app.config import Settings
from app.exceptions import BadRequestError, UnauthorizedError
from lib.utils import hash_password, utcnow, verify_password

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ADMIN_ROLE = "admin"


class AdminSessionManager:
    """Issues, verifies and revokes admin session tokens."""

    def __init__(self, settings: Settings):
        self._secret = settings.SECRET_KEY
        self._ttl = timedelta(hours=settings.ADMIN_TOKEN_TTL_HOURS)
        self._username = settings.ADMIN_USERNAME
        self._password_hash = hash_password(settings.ADMIN_PASSWORD)
        self._revoked: set[str] = set()

    def login(self, username: str, password: str) -> LoginResponse:
        """
        Exchange admin credentials for a session token.

        Raises:
            UnauthorizedError: If the username or password is wrong
        """
        if username != self._username or not verify_password(password, self._password_hash):
            logger.warning(f"Failed admin login for {username!r}")
            raise UnauthorizedError("Invalid username or password")

        now = utcnow()
        expires_at = now + self._ttl
        payload = {
            "sub": username,
            "role": ADMIN_ROLE,
            "jti": str(uuid4()),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        logger.info(f"Admin {username} logged in")
        return LoginResponse(token=token, username=username, expires_at=expires_at)

    def verify(self, token: str) -> AdminIdentity:
        """
        Verify a session token.

        Raises:
            UnauthorizedError: 401 if the token is expired, malformed, not an
                admin token, or revoked
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError:
            logger.warning("Admin token has expired")
            raise UnauthorizedError("Token has expired")
        except JWTError as e:
            logger.warning(f"Admin token validation failed: {e}")
            raise UnauthorizedError("Invalid admin token")

        token_id = payload.get("jti")
        if payload.get("role") != ADMIN_ROLE or not payload.get("sub") or not token_id:
            raise UnauthorizedError("Invalid admin token")
        if token_id in self._revoked:
            raise UnauthorizedError("Invalid admin token")

        return AdminIdentity(
            username=payload["sub"],
            token_id=token_id,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def revoke(self, identity: AdminIdentity) -> None:
        self._revoked.add(identity.token_id)
        logger.info(f"Revoked admin token {identity.token_id}")

    def change_password(self, identity: AdminIdentity, current: str, new: str) -> None:
        """
        Replace the admin password and end the current session.

        Raises:
            BadRequestError: If the current password is wrong
        """
        if not verify_password(current, self._password_hash):
            raise BadRequestError("Current password is incorrect")
        self._password_hash = hash_password(new)
        self.revoke(identity)
        logger.info(f"Admin {identity.username} changed password")
