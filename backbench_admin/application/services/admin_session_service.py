"""Admin session service - secret login and session token checks."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
import structlog

from backbench_admin.core.metrics import record_admin_login
from backbench_admin.domain.exceptions import (
    AdminAuthNotConfiguredException,
    UnauthorizedException,
)

logger = structlog.get_logger(__name__)


class AdminSessionService:
    """
    Issues and verifies admin session tokens.

    Admins log in with the shared admin secret. The session token is an
    HS256 JWT signed with that same secret, so rotating the secret
    revokes every outstanding session.
    """

    ALGORITHM = "HS256"
    SUBJECT = "admin"

    def __init__(self, secret: str | None, max_age_seconds: int):
        self._secret = secret
        self._max_age = max_age_seconds

    @property
    def max_age_seconds(self) -> int:
        return self._max_age

    def login(self, candidate: str | None) -> str:
        """
        Exchange the admin secret for a session token.

        Raises:
            AdminAuthNotConfiguredException: If no admin secret is set
            UnauthorizedException: If the secret does not match
        """
        if not self._secret:
            record_admin_login("misconfigured")
            logger.error("admin_secret_not_configured")
            raise AdminAuthNotConfiguredException()

        if not candidate or not secrets.compare_digest(
            candidate.encode("utf-8"),
            self._secret.encode("utf-8"),
        ):
            record_admin_login("invalid_secret")
            logger.warning("admin_login_rejected")
            raise UnauthorizedException("Invalid secret")

        record_admin_login("success")
        logger.info("admin_login_succeeded")

        now = datetime.now(timezone.utc)
        claims = {
            "sub": self.SUBJECT,
            "iat": now,
            "exp": now + timedelta(seconds=self._max_age),
        }
        return jwt.encode(claims, self._secret, algorithm=self.ALGORITHM)

    def verify(self, token: str | None) -> Dict[str, Any]:
        """
        Check a session token.

        Returns:
            The token's claims

        Raises:
            UnauthorizedException: If the token is missing, expired,
                tampered with, or admin login is not configured
        """
        if not token or not self._secret:
            raise UnauthorizedException()

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError as e:
            logger.warning("admin_session_rejected", error=str(e))
            raise UnauthorizedException() from e

        if claims.get("sub") != self.SUBJECT:
            raise UnauthorizedException()

        return claims
