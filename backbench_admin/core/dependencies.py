"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated, AsyncGenerator, Any, Dict

from fastapi import Depends, Request

from backbench_admin.core.cache import StatsCache
from backbench_admin.core.config import settings
from backbench_admin.domain.interfaces import AdminDataStore
from backbench_admin.infrastructure.database import db_manager
from backbench_admin.infrastructure.stores import (
    RestAdminDataStore,
    SqlAdminDataStore,
)
from backbench_admin.application.services import (
    AdminSessionService,
    StatsAggregator,
    StudentDetailResolver,
    StudentModerationService,
)


# Store dependencies
async def get_store() -> AsyncGenerator[AdminDataStore, None]:
    """Get the configured AdminDataStore, closed after the request."""
    if settings.store_backend == "sql":
        store: AdminDataStore = SqlAdminDataStore(db_manager.session_factory)
    else:
        store = RestAdminDataStore()

    try:
        yield store
    finally:
        await store.close()


@lru_cache
def get_stats_cache() -> StatsCache:
    """Get the process-wide dashboard stats cache."""
    return StatsCache(
        ttl_seconds=settings.stats_cache_ttl_seconds,
        maxsize=settings.stats_cache_size,
    )


# Auth dependencies
def get_admin_session_service() -> AdminSessionService:
    """Get an AdminSessionService instance."""
    return AdminSessionService(
        secret=settings.admin_secret,
        max_age_seconds=settings.admin_session_max_age_seconds,
    )


def require_admin(
    request: Request,
    session_service: Annotated[AdminSessionService, Depends(get_admin_session_service)],
) -> Dict[str, Any]:
    """
    Guard for admin routes.

    Raises UnauthorizedException before any store dependency is used.
    """
    token = request.cookies.get(settings.admin_session_cookie)
    return session_service.verify(token)


# Service dependencies
def get_stats_aggregator(
    store: Annotated[AdminDataStore, Depends(get_store)],
    cache: Annotated[StatsCache, Depends(get_stats_cache)],
) -> StatsAggregator:
    """Get a StatsAggregator instance."""
    return StatsAggregator(
        store=store,
        cache=cache,
        timeout=settings.store_timeout_seconds,
    )


def get_student_detail_resolver(
    store: Annotated[AdminDataStore, Depends(get_store)],
) -> StudentDetailResolver:
    """Get a StudentDetailResolver instance."""
    return StudentDetailResolver(
        store=store,
        timeout=settings.store_timeout_seconds,
    )


def get_student_moderation_service(
    store: Annotated[AdminDataStore, Depends(get_store)],
    cache: Annotated[StatsCache, Depends(get_stats_cache)],
) -> StudentModerationService:
    """Get a StudentModerationService instance."""
    return StudentModerationService(
        store=store,
        cache=cache,
        timeout=settings.store_timeout_seconds,
    )
