"""Pydantic schemas for admin session endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class AdminLoginRequestSchema(BaseModel):
    secret: Optional[str] = Field(None, description="Shared admin secret")


class SuccessResponseSchema(BaseModel):
    success: bool = True
