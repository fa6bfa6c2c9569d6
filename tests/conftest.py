"""
Shared fixtures for unit and integration tests.

Provides:
- In-memory AdminDataStore with call tracking and failure modes
- Sample store payloads for the dashboard and student detail pages
"""

import asyncio
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Set

import pytest

from backbench_admin.domain.exceptions import DataStoreException
from backbench_admin.domain.interfaces import AdminDataStore, Row


# =============================================================================
# Sample Data
# =============================================================================

STUDENT_ID = "0b7c6a3e-2f41-4d0e-9d55-6f1c1f3b9a10"


def sample_student_stats_payload(student_id: str = STUDENT_ID) -> Row:
    """A successful aggregation procedure result, as the store returns it."""
    return {
        "success": True,
        "data": {
            "student": {
                "id": student_id,
                "name": "Asha Rao",
                "email": "asha@example.edu",
                "bb_id": "BB-1042",
                "profile_image": "https://cdn.example.com/asha.png",
                "college": "City College",
                "city": "Pune",
                "state": "MH",
                "gender": "female",
                "dob": "2003-04-12",
                "status": "verified",
                "created_at": "2024-01-02T10:00:00+00:00",
                "total_redemptions": 3,
                "passcode_hash": "$2b$12$secret",
            },
            "offlineTransactions": [
                {
                    "id": "txn-1",
                    "student_id": student_id,
                    "merchant_id": "m-1",
                    "merchant_name": "Chai Point",
                    "offer_title": "10% off",
                    "discount_amount": "12.50",
                    "final_amount": 112.5,
                    "redeemed_at": "2024-05-01T09:30:00+00:00",
                    "internal_note": "do not show",
                },
            ],
            "onlineRedemptions": [
                {
                    "id": "red-1",
                    "offer_id": "o-1",
                    "code_used": "STUDENT20",
                    "revealed_at": None,
                    "created_at": "2024-05-02T12:00:00+00:00",
                    "status": "revealed",
                    "offer_title": "20% off sneakers",
                    "offer_code": "STUDENT20",
                    "brand_name": None,
                    "brand_logo": None,
                },
                {
                    "id": "red-2",
                    "offer_id": "o-2",
                    "code_used": "BB50",
                    "revealed_at": "2024-05-03T08:00:00+00:00",
                    "created_at": "2024-05-03T07:59:00+00:00",
                    "status": "revealed",
                    "offer_title": "Flat 50",
                    "offer_code": "BB50",
                    "brand_name": "Snackly",
                    "brand_logo": "https://cdn.example.com/snackly.png",
                },
            ],
            "stats": {"totalSavings": 12.5, "offlineCount": 1, "onlineCount": 2},
        },
    }


def sample_dashboard_rows(now: Optional[datetime] = None) -> Dict[str, List[Row]]:
    """Rows for a small marketplace with one redemption today and one this week."""
    now = now or datetime.now().astimezone()
    return {
        "students": [
            {"status": "verified"},
            {"status": "verified"},
            {"status": "pending"},
            {"status": "suspended"},
        ],
        "merchants": [
            {"status": "approved"},
            {"status": "pending"},
            {"status": "rejected"},
        ],
        "offers": [
            {"status": "active"},
            {"status": "active"},
            {"status": "paused"},
        ],
        "transactions": [
            {
                "final_amount": 100,
                "discount_amount": 20,
                "redeemed_at": now.isoformat(),
            },
            {
                "final_amount": "50",
                "discount_amount": "5",
                "redeemed_at": (now - timedelta(days=3)).isoformat(),
            },
            {
                "final_amount": None,
                "discount_amount": 10,
                "redeemed_at": None,
            },
        ],
    }


# =============================================================================
# Fake Store
# =============================================================================

class FakeAdminDataStore(AdminDataStore):
    """In-memory store that records calls and can fail or stall on demand."""

    def __init__(
        self,
        students: Optional[List[Row]] = None,
        merchants: Optional[List[Row]] = None,
        offers: Optional[List[Row]] = None,
        transactions: Optional[List[Row]] = None,
        student_results: Optional[Dict[str, Row]] = None,
        fail_on: Optional[Set[str]] = None,
        delay: float = 0.0,
    ):
        self.students = students or []
        self.merchants = merchants or []
        self.offers = offers or []
        self.transactions = transactions or []
        self.student_results = student_results or {}
        self.fail_on = fail_on or set()
        self.delay = delay
        self.calls: List[str] = []
        self.cancelled: List[str] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if self.delay:
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled.append(operation)
                raise
        if operation in self.fail_on:
            raise DataStoreException(
                message=f"{operation} failed",
                operation=operation,
                status_code=500,
            )

    async def fetch_student_statuses(self) -> List[Row]:
        await self._enter("fetch_student_statuses")
        return list(self.students)

    async def fetch_merchant_statuses(self) -> List[Row]:
        await self._enter("fetch_merchant_statuses")
        return list(self.merchants)

    async def fetch_offer_statuses(self) -> List[Row]:
        await self._enter("fetch_offer_statuses")
        return list(self.offers)

    async def fetch_transaction_amounts(self) -> List[Row]:
        await self._enter("fetch_transaction_amounts")
        return list(self.transactions)

    async def get_student_admin_stats(self, student_id: str) -> Optional[Row]:
        await self._enter("get_student_admin_stats")
        return self.student_results.get(
            student_id,
            {"success": False, "error": "Student not found"},
        )

    async def update_student_status(
        self,
        student_id: str,
        status: str,
    ) -> Optional[Row]:
        await self._enter("update_student_status")
        result = self.student_results.get(student_id)
        if result is None:
            return None
        result["data"]["student"]["status"] = status
        return {"id": student_id, "status": status}

    async def close(self) -> None:
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def dashboard_store() -> FakeAdminDataStore:
    """A store holding the sample marketplace."""
    return FakeAdminDataStore(**sample_dashboard_rows())


@pytest.fixture
def student_store() -> FakeAdminDataStore:
    """A store knowing exactly one student."""
    return FakeAdminDataStore(
        student_results={STUDENT_ID: sample_student_stats_payload()},
    )
