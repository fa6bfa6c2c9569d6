"""
Integration tests for GET /v1/admin/stats.

These tests verify:
1. The stats envelope and camelCase field names
2. Admin session enforcement before any store access
3. Store failures map to 503 without partial stats
4. Caching and the refresh parameter
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from backbench_admin.main import app
from backbench_admin.application.services import StatsAggregator
from backbench_admin.core.config import settings
from backbench_admin.infrastructure.stores import RestAdminDataStore

from tests.conftest import FakeAdminDataStore

STATS_FIELDS = {
    "totalStudents",
    "verifiedStudents",
    "pendingStudents",
    "totalMerchants",
    "approvedMerchants",
    "pendingMerchants",
    "totalOffers",
    "activeOffers",
    "totalTransactions",
    "todayTransactions",
    "weekTransactions",
    "totalRevenue",
    "totalSavings",
    "todayRevenue",
    "todaySavings",
}


# =============================================================================
# Happy Path Tests
# =============================================================================

class TestDashboardStats:
    """Tests for a successful stats computation."""

    @pytest.mark.asyncio
    async def test_returns_stats_envelope(self, client: AsyncClient):
        response = await client.get("/v1/admin/stats")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert set(body["data"].keys()) == STATS_FIELDS

    @pytest.mark.asyncio
    async def test_sample_marketplace_values(self, client: AsyncClient):
        response = await client.get("/v1/admin/stats")

        data = response.json()["data"]
        assert data["totalStudents"] == 4
        assert data["verifiedStudents"] == 2
        assert data["pendingStudents"] == 1
        assert data["totalMerchants"] == 3
        assert data["approvedMerchants"] == 1
        assert data["pendingMerchants"] == 1
        assert data["totalOffers"] == 3
        assert data["activeOffers"] == 2
        assert data["totalTransactions"] == 3
        assert data["weekTransactions"] == 2
        assert data["totalRevenue"] == 150
        assert data["totalSavings"] == 35

    @pytest.mark.asyncio
    async def test_money_fields_are_integers(self, client: AsyncClient):
        response = await client.get("/v1/admin/stats")

        data = response.json()["data"]
        for field in ("totalRevenue", "totalSavings", "todayRevenue", "todaySavings"):
            assert isinstance(data[field], int)


# =============================================================================
# Authorization Tests
# =============================================================================

class TestDashboardStatsAuthorization:
    """Tests for the admin session guard."""

    @pytest.mark.asyncio
    async def test_missing_session_is_401(
        self,
        anonymous_client: AsyncClient,
        fake_store: FakeAdminDataStore,
    ):
        response = await anonymous_client.get("/v1/admin/stats")

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Unauthorized - Admin access required"
        assert fake_store.call_count == 0

    @pytest.mark.asyncio
    async def test_garbage_session_is_401(
        self,
        anonymous_client: AsyncClient,
        fake_store: FakeAdminDataStore,
    ):
        response = await anonymous_client.get(
            "/v1/admin/stats",
            headers={"Cookie": "bb_admin_session=not-a-token"},
        )

        assert response.status_code == 401
        assert fake_store.call_count == 0


# =============================================================================
# Failure Tests
# =============================================================================

class TestDashboardStatsFailures:
    """Tests for store failures and unexpected errors."""

    @pytest.mark.asyncio
    async def test_store_failure_is_503(self, client_with_failing_store: AsyncClient):
        response = await client_with_failing_store.get("/v1/admin/stats")

        assert response.status_code == 503
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "DATA_STORE_ERROR"
        assert "data" not in body

    @pytest.mark.asyncio
    async def test_store_failure_message_is_opaque(
        self,
        client_with_failing_store: AsyncClient,
    ):
        response = await client_with_failing_store.get("/v1/admin/stats")

        assert response.json()["error"] == StatsAggregator.UPSTREAM_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_upstream_error_text_is_not_exposed(
        self,
        admin_token: str,
        override_dependencies,
    ):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/offers"):
                return httpx.Response(
                    500,
                    json={"message": 'relation "public.offers" does not exist'},
                )
            return httpx.Response(200, json=[])

        store = RestAdminDataStore(
            base_url="https://project.example.co",
            service_key="service-role-key",
            transport=httpx.MockTransport(handler),
        )
        override_dependencies(store)

        transport = ASGITransport(app=app)
        async with AsyncClient(
            transport=transport,
            base_url="http://test",
            headers={"Cookie": f"{settings.admin_session_cookie}={admin_token}"},
        ) as ac:
            response = await ac.get("/v1/admin/stats")

        app.dependency_overrides.clear()

        assert response.status_code == 503
        body = response.json()
        assert body["error"] == StatsAggregator.UPSTREAM_ERROR_MESSAGE
        assert "public.offers" not in response.text

    @pytest.mark.asyncio
    async def test_unexpected_error_is_generic_500(self, client_without_raising: AsyncClient):
        response = await client_without_raising.get("/v1/admin/stats")

        assert response.status_code == 500
        body = response.json()
        assert body == {
            "success": False,
            "error": "An unexpected error occurred.",
            "code": "INTERNAL_ERROR",
            "request_id": body["request_id"],
        }


# =============================================================================
# Cache Tests
# =============================================================================

class TestDashboardStatsCache:
    """Tests for cached stats."""

    @pytest.mark.asyncio
    async def test_second_request_is_served_from_cache(
        self,
        client: AsyncClient,
        fake_store: FakeAdminDataStore,
    ):
        await client.get("/v1/admin/stats")
        await client.get("/v1/admin/stats")

        assert fake_store.call_count == 4

    @pytest.mark.asyncio
    async def test_refresh_recomputes(
        self,
        client: AsyncClient,
        fake_store: FakeAdminDataStore,
    ):
        await client.get("/v1/admin/stats")
        response = await client.get("/v1/admin/stats", params={"refresh": "true"})

        assert response.status_code == 200
        assert fake_store.call_count == 8
