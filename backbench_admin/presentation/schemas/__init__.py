"""Pydantic schemas for API request/response validation."""

from .auth import AdminLoginRequestSchema, SuccessResponseSchema
from .dashboard import DashboardStatsResponseSchema, DashboardStatsSchema
from .student import (
    OfflineTransactionSchema,
    OnlineRedemptionSchema,
    StudentDetailResponseSchema,
    StudentDetailSchema,
    StudentProfileSchema,
    StudentStatsSchema,
    StudentStatusResponseSchema,
    StudentStatusSchema,
    StudentStatusUpdateSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "AdminLoginRequestSchema",
    "SuccessResponseSchema",
    "DashboardStatsResponseSchema",
    "DashboardStatsSchema",
    "OfflineTransactionSchema",
    "OnlineRedemptionSchema",
    "StudentDetailResponseSchema",
    "StudentDetailSchema",
    "StudentProfileSchema",
    "StudentStatsSchema",
    "StudentStatusResponseSchema",
    "StudentStatusSchema",
    "StudentStatusUpdateSchema",
    "ErrorResponseSchema",
]
