"""Admin session login and sign-out endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from backbench_admin.application.services import AdminSessionService
from backbench_admin.core.config import settings
from backbench_admin.core.dependencies import get_admin_session_service
from backbench_admin.presentation.schemas import (
    AdminLoginRequestSchema,
    ErrorResponseSchema,
    SuccessResponseSchema,
)

admin_auth_router = APIRouter()


@admin_auth_router.post(
    "/auth/admin-login",
    response_model=SuccessResponseSchema,
    summary="Admin Login",
    description="Exchange the admin secret for an HTTP-only session cookie.",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Invalid secret"},
        500: {"model": ErrorResponseSchema, "description": "Admin login not configured"},
    },
)
async def admin_login(
    body: AdminLoginRequestSchema,
    response: Response,
    session_service: Annotated[AdminSessionService, Depends(get_admin_session_service)],
) -> SuccessResponseSchema:
    token = session_service.login(body.secret)

    response.set_cookie(
        key=settings.admin_session_cookie,
        value=token,
        max_age=session_service.max_age_seconds,
        path="/",
        httponly=True,
        secure=settings.admin_cookie_secure,
        samesite="strict",
    )
    return SuccessResponseSchema()


@admin_auth_router.post(
    "/admin/signout",
    response_model=SuccessResponseSchema,
    summary="Admin Sign Out",
    description="Expire the admin session cookie.",
)
async def admin_signout(response: Response) -> SuccessResponseSchema:
    response.delete_cookie(
        key=settings.admin_session_cookie,
        path="/",
        httponly=True,
        secure=settings.admin_cookie_secure,
        samesite="strict",
    )
    return SuccessResponseSchema()
