"""Domain Entities - Core business objects."""

from .dashboard import DashboardStats
from .status import MerchantStatus, OfferStatus, StudentStatus
from .student import (
    OfflineTransaction,
    OnlineRedemption,
    StudentDetail,
    StudentProfile,
    StudentStats,
)

__all__ = [
    "DashboardStats",
    "MerchantStatus",
    "OfferStatus",
    "StudentStatus",
    "OfflineTransaction",
    "OnlineRedemption",
    "StudentDetail",
    "StudentProfile",
    "StudentStats",
]
