"""Data Transfer Objects for application layer."""

from .student import (
    StudentStatsRequest,
    StudentStatusResponse,
    StudentStatusUpdateRequest,
)

__all__ = [
    "StudentStatsRequest",
    "StudentStatusResponse",
    "StudentStatusUpdateRequest",
]
