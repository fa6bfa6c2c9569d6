"""Admin dashboard statistics endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from backbench_admin.application.services import StatsAggregator
from backbench_admin.core.dependencies import get_stats_aggregator, require_admin
from backbench_admin.presentation.schemas import (
    DashboardStatsResponseSchema,
    DashboardStatsSchema,
    ErrorResponseSchema,
)

admin_stats_router = APIRouter(
    prefix="/admin",
    dependencies=[Depends(require_admin)],
    responses={
        401: {"model": ErrorResponseSchema, "description": "Admin session required"},
        503: {"model": ErrorResponseSchema, "description": "Data store unavailable"},
    },
)


@admin_stats_router.get(
    "/stats",
    response_model=DashboardStatsResponseSchema,
    summary="Get Dashboard Stats",
    description="""
    Counts of students, merchants and offers by status, plus redemption
    counts and money totals for today, the trailing 7 days and all time.
    """,
    responses={
        200: {"description": "Stats computed successfully"},
    },
)
async def get_dashboard_stats(
    aggregator: Annotated[StatsAggregator, Depends(get_stats_aggregator)],
    refresh: Annotated[
        bool,
        Query(description="Bypass the stats cache"),
    ] = False,
) -> DashboardStatsResponseSchema:
    stats = await aggregator.compute_dashboard_stats(refresh=refresh)

    return DashboardStatsResponseSchema(
        data=DashboardStatsSchema.model_validate(stats),
    )
