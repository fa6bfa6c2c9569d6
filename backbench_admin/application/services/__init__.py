"""Application services (use cases)."""

from .admin_session_service import AdminSessionService
from .stats_service import StatsAggregator
from .student_service import StudentDetailResolver, StudentModerationService

__all__ = [
    "AdminSessionService",
    "StatsAggregator",
    "StudentDetailResolver",
    "StudentModerationService",
]
