"""Stats aggregator - computes the admin dashboard statistics."""

import asyncio
from datetime import datetime
from typing import Any, Coroutine, List, Optional

import structlog

from backbench_admin.core.cache import StatsCache
from backbench_admin.core.metrics import record_stats_cache, track_stats_latency
from backbench_admin.domain.entities import DashboardStats
from backbench_admin.domain.exceptions import DataStoreException, StoreTimeoutException
from backbench_admin.domain.interfaces import AdminDataStore, Row
from backbench_admin.service.aggregation import build_dashboard_stats

from .timeouts import run_with_timeout

logger = structlog.get_logger(__name__)


class StatsAggregator:
    """
    Application service for the dashboard statistics use case.

    Reads students, merchants, offers and transactions concurrently and
    reduces them into one DashboardStats. Any failed read fails the whole
    computation; partial statistics are never returned or cached.
    """

    OPERATION = "dashboard_stats"
    UPSTREAM_ERROR_MESSAGE = "Failed to fetch stats"

    def __init__(
        self,
        store: AdminDataStore,
        cache: StatsCache | None = None,
        timeout: float = 10.0,
    ):
        self._store = store
        self._cache = cache
        self._timeout = timeout

    async def compute_dashboard_stats(
        self,
        refresh: bool = False,
        now: Optional[datetime] = None,
    ) -> DashboardStats:
        """
        Compute marketplace-wide dashboard statistics.

        Args:
            refresh: Skip the cache and recompute
            now: Reference instant for the today/week buckets

        Returns:
            DashboardStats

        Raises:
            DataStoreException: If any of the four reads fails
            StoreTimeoutException: If the reads exceed the time budget
        """
        if self._cache is not None and self._cache.enabled and not refresh:
            cached = self._cache.get()
            record_stats_cache(hit=cached is not None)
            if cached is not None:
                logger.info("dashboard_stats_cache_hit")
                return cached

        with track_stats_latency():
            try:
                students, merchants, offers, transactions = await run_with_timeout(
                    self._fetch_all(),
                    self.OPERATION,
                    self._timeout,
                )
            except StoreTimeoutException:
                raise
            except DataStoreException as e:
                logger.error(
                    "dashboard_stats_read_failed",
                    operation=e.operation,
                    error=e.message,
                )
                raise DataStoreException(
                    message=self.UPSTREAM_ERROR_MESSAGE,
                    operation=self.OPERATION,
                    status_code=e.status_code,
                ) from e

            stats = build_dashboard_stats(
                students=students,
                merchants=merchants,
                offers=offers,
                transactions=transactions,
                now=now,
            )

        logger.info(
            "dashboard_stats_computed",
            total_students=stats.total_students,
            total_merchants=stats.total_merchants,
            total_offers=stats.total_offers,
            total_transactions=stats.total_transactions,
            today_transactions=stats.today_transactions,
        )

        if self._cache is not None:
            self._cache.set(stats)

        return stats

    async def _fetch_all(self) -> List[List[Row]]:
        """Issue the four bulk reads at once; a failure cancels the rest."""
        reads: List[Coroutine[Any, Any, List[Row]]] = [
            self._store.fetch_student_statuses(),
            self._store.fetch_merchant_statuses(),
            self._store.fetch_offer_statuses(),
            self._store.fetch_transaction_amounts(),
        ]
        tasks = [asyncio.ensure_future(read) for read in reads]

        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
