"""Pydantic schemas for the dashboard stats endpoint."""

from pydantic import BaseModel, Field

from .base import CamelModel


class DashboardStatsSchema(CamelModel):
    """Marketplace-wide counts and money totals."""
    total_students: int = Field(..., description="All students")
    verified_students: int = Field(..., description="Students with status verified")
    pending_students: int = Field(..., description="Students with status pending")
    total_merchants: int = Field(..., description="All merchants")
    approved_merchants: int = Field(..., description="Merchants with status approved")
    pending_merchants: int = Field(..., description="Merchants with status pending")
    total_offers: int = Field(..., description="All offers")
    active_offers: int = Field(..., description="Offers with status active")
    total_transactions: int = Field(..., description="All in-person redemptions")
    today_transactions: int = Field(..., description="Redemptions since local midnight")
    week_transactions: int = Field(..., description="Redemptions in the trailing 7 days")
    total_revenue: int = Field(..., description="Sum of final amounts, whole units")
    total_savings: int = Field(..., description="Sum of discounts, whole units")
    today_revenue: int = Field(..., description="Today's final amounts, whole units")
    today_savings: int = Field(..., description="Today's discounts, whole units")


class DashboardStatsResponseSchema(BaseModel):
    success: bool = True
    data: DashboardStatsSchema

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "data": {
                        "totalStudents": 1200,
                        "verifiedStudents": 950,
                        "pendingStudents": 200,
                        "totalMerchants": 85,
                        "approvedMerchants": 70,
                        "pendingMerchants": 10,
                        "totalOffers": 140,
                        "activeOffers": 120,
                        "totalTransactions": 5400,
                        "todayTransactions": 42,
                        "weekTransactions": 310,
                        "totalRevenue": 812000,
                        "totalSavings": 96500,
                        "todayRevenue": 6100,
                        "todaySavings": 740,
                    },
                }
            ]
        }
    }
