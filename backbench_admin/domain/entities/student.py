"""Student detail entities as presented to the admin dashboard."""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class StudentProfile:
    """A student's record, with savings taken from the aggregated stats."""

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


@dataclass(frozen=True)
class OfflineTransaction:
    """An in-person redemption joined with merchant and offer display fields."""

    id: str
    student_id: Optional[str]
    merchant_id: Optional[str]
    merchant_name: Optional[str]
    offer_title: Optional[str]
    discount_amount: float
    final_amount: float
    redeemed_at: Optional[str]
    status: str = "completed"


@dataclass(frozen=True)
class OnlineRedemption:
    """An online code reveal joined with brand and offer display fields."""

    id: str
    offer_id: Optional[str]
    code_used: Optional[str]
    revealed_at: Optional[str]
    status: Optional[str]
    offer_title: Optional[str]
    offer_code: Optional[str]
    brand_name: str
    brand_logo: Optional[str]


@dataclass(frozen=True)
class StudentStats:
    """Precomputed totals returned alongside the histories."""

    total_savings: Any
    offline_count: int
    online_count: int


@dataclass(frozen=True)
class StudentDetail:
    """Everything the admin student page shows for one student."""

    student: StudentProfile
    offline_transactions: List[OfflineTransaction] = field(default_factory=list)
    online_redemptions: List[OnlineRedemption] = field(default_factory=list)
    stats: Optional[StudentStats] = None
