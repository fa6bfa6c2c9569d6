"""Dashboard statistics entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    """
    Marketplace-wide counts and money totals for the admin dashboard.

    Monetary totals are whole currency units, rounded once when the
    stats are assembled.

    Attributes:
        total_students: Every student row
        verified_students: Students with status ``verified``
        pending_students: Students with status ``pending``
        total_merchants: Every merchant row
        approved_merchants: Merchants with status ``approved``
        pending_merchants: Merchants with status ``pending``
        total_offers: Every offer row
        active_offers: Offers with status ``active``
        total_transactions: Every in-person redemption
        today_transactions: Redemptions since local midnight
        week_transactions: Redemptions in the trailing 7 days
        total_revenue: Sum of final amounts
        total_savings: Sum of discount amounts
        today_revenue: Sum of final amounts since local midnight
        today_savings: Sum of discount amounts since local midnight
    """

    total_students: int
    verified_students: int
    pending_students: int
    total_merchants: int
    approved_merchants: int
    pending_merchants: int
    total_offers: int
    active_offers: int
    total_transactions: int
    today_transactions: int
    week_transactions: int
    total_revenue: int
    total_savings: int
    today_revenue: int
    today_savings: int
