"""Admin student detail and moderation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from backbench_admin.application.services import (
    StudentDetailResolver,
    StudentModerationService,
)
from backbench_admin.core.dependencies import (
    get_student_detail_resolver,
    get_student_moderation_service,
    require_admin,
)
from backbench_admin.presentation.schemas import (
    ErrorResponseSchema,
    StudentDetailResponseSchema,
    StudentDetailSchema,
    StudentStatusResponseSchema,
    StudentStatusSchema,
    StudentStatusUpdateSchema,
)

admin_students_router = APIRouter(
    prefix="/admin/students",
    dependencies=[Depends(require_admin)],
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        401: {"model": ErrorResponseSchema, "description": "Admin session required"},
        404: {"model": ErrorResponseSchema, "description": "Student not found"},
        503: {"model": ErrorResponseSchema, "description": "Data store unavailable"},
    },
)


@admin_students_router.get(
    "/{student_id}/stats",
    response_model=StudentDetailResponseSchema,
    summary="Get Student Detail",
    description="""
    Retrieve a student's profile with their in-person transactions and
    online code reveals, read together in one aggregation call.
    """,
    responses={
        200: {"description": "Student retrieved successfully"},
    },
)
async def get_student_stats(
    student_id: Annotated[str, Path(description="ID of the student")],
    resolver: Annotated[StudentDetailResolver, Depends(get_student_detail_resolver)],
) -> StudentDetailResponseSchema:
    detail = await resolver.get_student_admin_stats(student_id)

    return StudentDetailResponseSchema(
        data=StudentDetailSchema.model_validate(detail),
    )


@admin_students_router.patch(
    "/{student_id}/status",
    response_model=StudentStatusResponseSchema,
    summary="Update Student Status",
    description="Verify, suspend or reinstate a student.",
    responses={
        200: {"description": "Status updated"},
    },
)
async def update_student_status(
    student_id: Annotated[str, Path(description="ID of the student")],
    body: StudentStatusUpdateSchema,
    moderation: Annotated[
        StudentModerationService,
        Depends(get_student_moderation_service),
    ],
) -> StudentStatusResponseSchema:
    result = await moderation.update_student_status(student_id, body.status)

    return StudentStatusResponseSchema(
        data=StudentStatusSchema(id=result.id, status=result.status),
    )
