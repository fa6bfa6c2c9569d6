"""Data store interface for the administrator back office."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Row = Dict[str, Any]


class AdminDataStore(ABC):
    """
    Privileged access to the marketplace's data.

    Rows are returned as plain dicts keyed by the store's snake_case
    column names. Implementations bypass row-level security and must only
    be reachable behind an admin session.
    """

    @abstractmethod
    async def fetch_student_statuses(self) -> List[Row]:
        """
        Read every student's ``status``.

        Raises:
            DataStoreException: If the read fails
        """
        ...

    @abstractmethod
    async def fetch_merchant_statuses(self) -> List[Row]:
        """
        Read every merchant's ``status``.

        Raises:
            DataStoreException: If the read fails
        """
        ...

    @abstractmethod
    async def fetch_offer_statuses(self) -> List[Row]:
        """
        Read every offer's ``status``.

        Raises:
            DataStoreException: If the read fails
        """
        ...

    @abstractmethod
    async def fetch_transaction_amounts(self) -> List[Row]:
        """
        Read ``final_amount``, ``discount_amount`` and ``redeemed_at``
        of every in-person transaction.

        Raises:
            DataStoreException: If the read fails
        """
        ...

    @abstractmethod
    async def get_student_admin_stats(self, student_id: str) -> Optional[Row]:
        """
        Run the student aggregation procedure as one atomic read.

        Args:
            student_id: The student's identifier

        Returns:
            ``{"success": True, "data": {"student", "offlineTransactions",
            "onlineRedemptions", "stats"}}`` for a known student, or
            ``{"success": False, "error": ...}`` / None when absent

        Raises:
            DataStoreException: If the procedure call fails
        """
        ...

    @abstractmethod
    async def update_student_status(
        self,
        student_id: str,
        status: str,
    ) -> Optional[Row]:
        """
        Set a student's lifecycle status.

        Returns:
            ``{"id", "status"}`` of the updated row, or None if no student
            has that id

        Raises:
            DataStoreException: If the write fails
        """
        ...

    async def close(self) -> None:
        """Release any connections held by the store."""
