"""
Normalization of the student aggregation result.

The store speaks snake_case; the dashboard expects the camelCase names
declared on the response schemas. Each builder below lists every field
it reads, so columns the procedure adds later are dropped instead of
leaking through.
"""

from typing import Any, Mapping, Optional

from backbench_admin.domain.entities import (
    OfflineTransaction,
    OnlineRedemption,
    StudentDetail,
    StudentProfile,
    StudentStats,
)

from .amounts import parse_amount

UNKNOWN_BRAND = "Unknown Brand"
OFFLINE_TRANSACTION_STATUS = "completed"


def _as_id(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def normalize_student(
    row: Mapping[str, Any],
    stats: Mapping[str, Any],
) -> StudentProfile:
    """Map a student row; savings come from the aggregated stats."""
    return StudentProfile(
        id=str(row.get("id")),
        name=row.get("name"),
        email=row.get("email"),
        bb_id=row.get("bb_id"),
        profile_image=row.get("profile_image"),
        college=row.get("college"),
        city=row.get("city"),
        state=row.get("state"),
        gender=row.get("gender"),
        dob=row.get("dob"),
        status=row.get("status"),
        created_at=row.get("created_at"),
        total_savings=stats.get("totalSavings"),
        total_redemptions=row.get("total_redemptions"),
    )


def normalize_offline_transaction(row: Mapping[str, Any]) -> OfflineTransaction:
    """Map an in-person transaction joined with merchant and offer."""
    return OfflineTransaction(
        id=str(row.get("id")),
        student_id=_as_id(row.get("student_id")),
        merchant_id=_as_id(row.get("merchant_id")),
        merchant_name=row.get("merchant_name"),
        offer_title=row.get("offer_title"),
        discount_amount=parse_amount(row.get("discount_amount")),
        final_amount=parse_amount(row.get("final_amount")),
        redeemed_at=row.get("redeemed_at"),
        status=OFFLINE_TRANSACTION_STATUS,
    )


def normalize_online_redemption(row: Mapping[str, Any]) -> OnlineRedemption:
    """
    Map an online code reveal joined with brand and offer.

    Legacy rows never recorded the reveal separately, so ``revealed_at``
    falls back to ``created_at``. An orphaned brand reference yields
    ``"Unknown Brand"``.
    """
    return OnlineRedemption(
        id=str(row.get("id")),
        offer_id=_as_id(row.get("offer_id")),
        code_used=row.get("code_used"),
        revealed_at=row.get("revealed_at") or row.get("created_at"),
        status=row.get("status"),
        offer_title=row.get("offer_title"),
        offer_code=row.get("offer_code"),
        brand_name=row.get("brand_name") or UNKNOWN_BRAND,
        brand_logo=row.get("brand_logo"),
    )


def normalize_student_detail(data: Mapping[str, Any]) -> StudentDetail:
    """
    Normalize the ``data`` object of the aggregation procedure.

    Args:
        data: ``{"student", "offlineTransactions", "onlineRedemptions",
            "stats"}`` as returned by the store

    Returns:
        StudentDetail ready for serialization
    """
    stats = data.get("stats") or {}
    offline = [
        normalize_offline_transaction(row)
        for row in data.get("offlineTransactions") or []
    ]
    online = [
        normalize_online_redemption(row)
        for row in data.get("onlineRedemptions") or []
    ]

    offline_count = stats.get("offlineCount")
    online_count = stats.get("onlineCount")

    return StudentDetail(
        student=normalize_student(data["student"], stats),
        offline_transactions=offline,
        online_redemptions=online,
        stats=StudentStats(
            total_savings=stats.get("totalSavings"),
            offline_count=len(offline) if offline_count is None else int(offline_count),
            online_count=len(online) if online_count is None else int(online_count),
        ),
    )
