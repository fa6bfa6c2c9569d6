"""Admin authentication domain exceptions."""

from .base import DomainException


class UnauthorizedException(DomainException):
    """Raised when a caller lacks a valid admin session."""

    def __init__(self, message: str = "Unauthorized - Admin access required"):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
        )


class AdminAuthNotConfiguredException(DomainException):
    """Raised when admin login is attempted without a configured secret."""

    def __init__(self):
        super().__init__(
            message="Server misconfiguration",
            code="ADMIN_AUTH_NOT_CONFIGURED",
        )
