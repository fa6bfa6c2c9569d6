"""Explicit TTL cache for dashboard statistics."""

from typing import Optional

import structlog
from cachetools import TTLCache

from backbench_admin.domain.entities import DashboardStats

logger = structlog.get_logger(__name__)


class StatsCache:
    """
    Holds the most recent DashboardStats for a fixed time-to-live.

    A TTL of zero disables caching. Writers that change counted data
    call ``invalidate`` so the next read recomputes.
    """

    KEY = "dashboard"

    def __init__(self, ttl_seconds: float, maxsize: int = 1):
        self._ttl = ttl_seconds
        self._cache: Optional[TTLCache] = (
            TTLCache(maxsize=maxsize, ttl=ttl_seconds) if ttl_seconds > 0 else None
        )

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def enabled(self) -> bool:
        return self._cache is not None

    def get(self) -> Optional[DashboardStats]:
        if self._cache is None:
            return None
        return self._cache.get(self.KEY)

    def set(self, stats: DashboardStats) -> None:
        if self._cache is None:
            return
        self._cache[self.KEY] = stats

    def invalidate(self) -> None:
        if self._cache is None:
            return
        self._cache.clear()
        logger.info("stats_cache_invalidated")

