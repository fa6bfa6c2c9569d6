"""
Aggregation functions for the admin dashboard and student detail pages
"""

from .amounts import parse_amount, round_half_up
from .windows import TimeWindows, build_windows, parse_timestamp
from .counts import StatusCounts, count_statuses
from .dashboard import TransactionTotals, build_dashboard_stats, summarize_transactions
from .normalize import (
    UNKNOWN_BRAND,
    normalize_offline_transaction,
    normalize_online_redemption,
    normalize_student,
    normalize_student_detail,
)

__all__ = [
    # Amounts
    "parse_amount",
    "round_half_up",
    # Time windows
    "TimeWindows",
    "build_windows",
    "parse_timestamp",
    # Counts
    "StatusCounts",
    "count_statuses",
    # Dashboard
    "TransactionTotals",
    "build_dashboard_stats",
    "summarize_transactions",
    # Student detail
    "UNKNOWN_BRAND",
    "normalize_offline_transaction",
    "normalize_online_redemption",
    "normalize_student",
    "normalize_student_detail",
]
