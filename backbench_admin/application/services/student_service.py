"""Student services - detail lookup and status moderation."""

import structlog

from backbench_admin.core.cache import StatsCache
from backbench_admin.core.metrics import (
    record_student_lookup,
    record_student_status_update,
)
from backbench_admin.domain.entities import StudentDetail
from backbench_admin.domain.exceptions import (
    DataStoreException,
    InvalidRequestException,
    StoreTimeoutException,
    StudentNotFoundException,
)
from backbench_admin.domain.interfaces import AdminDataStore
from backbench_admin.application.dto import (
    StudentStatsRequest,
    StudentStatusResponse,
    StudentStatusUpdateRequest,
)
from backbench_admin.service.aggregation import normalize_student_detail

from .timeouts import run_with_timeout

logger = structlog.get_logger(__name__)


class StudentDetailResolver:
    """
    Application service for the admin student detail use case.

    The student row and both redemption histories come from one call to
    the store's aggregation procedure, never from separate reads.
    """

    OPERATION = "get_student_admin_stats"
    UPSTREAM_ERROR_MESSAGE = "Database error or permissions missing"

    def __init__(self, store: AdminDataStore, timeout: float = 10.0):
        self._store = store
        self._timeout = timeout

    async def get_student_admin_stats(self, student_id: str | None) -> StudentDetail:
        """
        Fetch and normalize one student's detail.

        Args:
            student_id: The student's identifier

        Returns:
            StudentDetail with camelCase-ready fields

        Raises:
            InvalidRequestException: If student_id is missing or blank
            StudentNotFoundException: If the procedure finds no student
            StoreTimeoutException: If the procedure exceeds the time budget
            DataStoreException: If the procedure call fails
        """
        request = StudentStatsRequest(student_id=student_id)
        errors = request.validate()
        if errors:
            record_student_lookup("invalid")
            raise InvalidRequestException("; ".join(errors))

        student_id = student_id.strip()
        log = logger.bind(student_id=student_id)

        try:
            result = await run_with_timeout(
                self._store.get_student_admin_stats(student_id),
                self.OPERATION,
                self._timeout,
            )
        except StoreTimeoutException:
            raise
        except DataStoreException as e:
            log.error("student_stats_procedure_failed", error=e.message)
            raise DataStoreException(
                message=self.UPSTREAM_ERROR_MESSAGE,
                operation=self.OPERATION,
                status_code=e.status_code,
            ) from e

        if not result or not result.get("success"):
            record_student_lookup("not_found")
            log.warning("student_not_found")
            raise StudentNotFoundException(
                student_id,
                message=(result or {}).get("error"),
            )

        data = result.get("data") or {}
        if not data.get("student"):
            record_student_lookup("not_found")
            log.warning("student_not_found", reason="empty_student")
            raise StudentNotFoundException(student_id)

        detail = normalize_student_detail(data)
        record_student_lookup("found")

        log.info(
            "student_stats_retrieved",
            offline_transactions=len(detail.offline_transactions),
            online_redemptions=len(detail.online_redemptions),
        )

        return detail


class StudentModerationService:
    """
    Application service for changing a student's lifecycle status.

    A successful change invalidates the dashboard stats cache, since
    verified and pending counts depend on it.
    """

    OPERATION = "update_student_status"
    UPSTREAM_ERROR_MESSAGE = "Failed to update student status"

    def __init__(
        self,
        store: AdminDataStore,
        cache: StatsCache | None = None,
        timeout: float = 10.0,
    ):
        self._store = store
        self._cache = cache
        self._timeout = timeout

    async def update_student_status(
        self,
        student_id: str | None,
        status: str | None,
    ) -> StudentStatusResponse:
        """
        Set a student's status to verified, pending or suspended.

        Raises:
            InvalidRequestException: If either field is missing or the
                status is not allowed
            StudentNotFoundException: If no student has that id
            DataStoreException: If the write fails
        """
        request = StudentStatusUpdateRequest(student_id=student_id, status=status)
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        student_id = student_id.strip()

        try:
            row = await run_with_timeout(
                self._store.update_student_status(student_id, status),
                self.OPERATION,
                self._timeout,
            )
        except StoreTimeoutException:
            raise
        except DataStoreException as e:
            logger.error("student_status_update_failed", student_id=student_id, error=e.message)
            raise DataStoreException(
                message=self.UPSTREAM_ERROR_MESSAGE,
                operation=self.OPERATION,
                status_code=e.status_code,
            ) from e

        if row is None:
            logger.warning("student_not_found", student_id=student_id)
            raise StudentNotFoundException(student_id)

        if self._cache is not None:
            self._cache.invalidate()

        record_student_status_update(status)
        logger.info("student_status_updated", student_id=student_id, status=status)

        return StudentStatusResponse.from_row(row)
