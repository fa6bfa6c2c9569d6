"""Data store domain exceptions."""

from .base import DomainException


class DataStoreException(DomainException):
    """Raised when a read or write against the data store fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(
            message=message,
            code="DATA_STORE_ERROR",
        )
        self.operation = operation
        self.status_code = status_code


class StoreTimeoutException(DataStoreException):
    """Raised when a store operation exceeds its time budget."""

    def __init__(self, operation: str, timeout: float):
        super().__init__(
            message=f"Data store operation timed out: {operation} ({timeout}s)",
            operation=operation,
        )
        self.code = "STORE_TIMEOUT"
        self.timeout = timeout
