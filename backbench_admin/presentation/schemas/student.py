"""Pydantic schemas for admin student endpoints."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .base import CamelModel


class StudentProfileSchema(CamelModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    bb_id: Optional[str] = None
    profile_image: Optional[str] = None
    college: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    total_savings: Any = None
    total_redemptions: Optional[int] = None


class OfflineTransactionSchema(CamelModel):
    id: str
    student_id: Optional[str] = None
    merchant_id: Optional[str] = None
    merchant_name: Optional[str] = None
    offer_title: Optional[str] = None
    discount_amount: float
    final_amount: float
    redeemed_at: Optional[str] = None
    status: str


class OnlineRedemptionSchema(CamelModel):
    id: str
    offer_id: Optional[str] = None
    code_used: Optional[str] = None
    revealed_at: Optional[str] = None
    status: Optional[str] = None
    offer_title: Optional[str] = None
    offer_code: Optional[str] = None
    brand_name: str
    brand_logo: Optional[str] = None


class StudentStatsSchema(CamelModel):
    total_savings: Any = None
    offline_count: int
    online_count: int


class StudentDetailSchema(CamelModel):
    """A student with both redemption histories."""
    student: StudentProfileSchema
    offline_transactions: List[OfflineTransactionSchema]
    online_redemptions: List[OnlineRedemptionSchema]
    stats: Optional[StudentStatsSchema] = None


class StudentDetailResponseSchema(BaseModel):
    success: bool = True
    data: StudentDetailSchema


class StudentStatusUpdateSchema(BaseModel):
    """Request body for a status change."""
    status: Optional[str] = Field(
        None,
        description="New status: verified, pending or suspended",
        examples=["suspended"],
    )


class StudentStatusSchema(CamelModel):
    id: str
    status: str


class StudentStatusResponseSchema(BaseModel):
    success: bool = True
    data: StudentStatusSchema
