"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager
from .models import (
    Base,
    MerchantModel,
    OfferModel,
    OnlineBrandModel,
    OnlineOfferModel,
    OnlineRedemptionModel,
    StudentModel,
    TransactionModel,
)

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "MerchantModel",
    "OfferModel",
    "OnlineBrandModel",
    "OnlineOfferModel",
    "OnlineRedemptionModel",
    "StudentModel",
    "TransactionModel",
]
