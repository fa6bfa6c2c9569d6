"""Student-related domain exceptions."""

from .base import DomainException


class StudentNotFoundException(DomainException):
    """Raised when the requested student does not exist."""

    def __init__(self, student_id: str, message: str | None = None):
        super().__init__(
            message=message or "Student not found",
            code="STUDENT_NOT_FOUND",
        )
        self.student_id = student_id


class InvalidRequestException(DomainException):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
        )
