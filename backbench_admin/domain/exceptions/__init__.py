"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .auth import AdminAuthNotConfiguredException, UnauthorizedException
from .student import InvalidRequestException, StudentNotFoundException
from .store import DataStoreException, StoreTimeoutException

__all__ = [
    "DomainException",
    "AdminAuthNotConfiguredException",
    "UnauthorizedException",
    "InvalidRequestException",
    "StudentNotFoundException",
    "DataStoreException",
    "StoreTimeoutException",
]
