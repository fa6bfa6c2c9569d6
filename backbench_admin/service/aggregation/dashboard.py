"""
Dashboard statistics reduction.

Turns the four bulk reads (students, merchants, offers, transactions)
into a DashboardStats. Money is accumulated as floats and rounded only
when the result is assembled.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from backbench_admin.domain.entities import (
    DashboardStats,
    MerchantStatus,
    OfferStatus,
    StudentStatus,
)

from .amounts import parse_amount, round_half_up
from .counts import count_statuses
from .windows import TimeWindows, build_windows, parse_timestamp


@dataclass
class TransactionTotals:
    """Unrounded running totals for one pass over transactions."""

    count: int = 0
    revenue: float = 0.0
    savings: float = 0.0
    today_count: int = 0
    today_revenue: float = 0.0
    today_savings: float = 0.0
    week_count: int = 0


def summarize_transactions(
    rows: Iterable[Mapping[str, Any]],
    windows: TimeWindows,
) -> TransactionTotals:
    """
    Accumulate revenue, savings and bucket counts in one pass.

    Every row counts toward the all-time totals. Rows whose
    ``redeemed_at`` is missing or unparseable count toward nothing else;
    the today and week checks are made independently of each other.
    """
    totals = TransactionTotals()

    for row in rows:
        final_amount = parse_amount(row.get("final_amount"))
        discount_amount = parse_amount(row.get("discount_amount"))
        redeemed_at = parse_timestamp(row.get("redeemed_at"))

        totals.count += 1
        totals.revenue += final_amount
        totals.savings += discount_amount

        if redeemed_at is None:
            continue

        if windows.in_today(redeemed_at):
            totals.today_count += 1
            totals.today_revenue += final_amount
            totals.today_savings += discount_amount

        if windows.in_week(redeemed_at):
            totals.week_count += 1

    return totals


def build_dashboard_stats(
    students: Iterable[Mapping[str, Any]],
    merchants: Iterable[Mapping[str, Any]],
    offers: Iterable[Mapping[str, Any]],
    transactions: Iterable[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> DashboardStats:
    """
    Reduce raw store rows into dashboard statistics.

    Args:
        students: Rows carrying ``status``
        merchants: Rows carrying ``status``
        offers: Rows carrying ``status``
        transactions: Rows carrying ``final_amount``, ``discount_amount``
            and ``redeemed_at``
        now: Reference instant for the time buckets

    Returns:
        DashboardStats with money totals rounded to whole units
    """
    student_counts = count_statuses(students)
    merchant_counts = count_statuses(merchants)
    offer_counts = count_statuses(offers)
    totals = summarize_transactions(transactions, build_windows(now))

    return DashboardStats(
        total_students=student_counts.total,
        verified_students=student_counts.get(StudentStatus.VERIFIED),
        pending_students=student_counts.get(StudentStatus.PENDING),
        total_merchants=merchant_counts.total,
        approved_merchants=merchant_counts.get(MerchantStatus.APPROVED),
        pending_merchants=merchant_counts.get(MerchantStatus.PENDING),
        total_offers=offer_counts.total,
        active_offers=offer_counts.get(OfferStatus.ACTIVE),
        total_transactions=totals.count,
        today_transactions=totals.today_count,
        week_transactions=totals.week_count,
        total_revenue=round_half_up(totals.revenue),
        total_savings=round_half_up(totals.savings),
        today_revenue=round_half_up(totals.today_revenue),
        today_savings=round_half_up(totals.today_savings),
    )
