"""
Fixtures for integration tests.

Provides:
- Test clients for the FastAPI app, with and without an admin session
- Fake data stores wired in through dependency overrides
- Throwaway SQLite database for the SQL store
"""

from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from backbench_admin.main import app
from backbench_admin.application.services import AdminSessionService
from backbench_admin.core.cache import StatsCache
from backbench_admin.core.config import settings
from backbench_admin.core.dependencies import (
    get_admin_session_service,
    get_stats_cache,
    get_store,
)
from backbench_admin.infrastructure.database import Base

from tests.conftest import (
    STUDENT_ID,
    FakeAdminDataStore,
    sample_dashboard_rows,
    sample_student_stats_payload,
)

ADMIN_SECRET = "integration-admin-secret-0123456789abcdef"


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    Create a file-backed SQLite async engine for testing.

    A file rather than :memory: so concurrent sessions each get their
    own connection, as they would against Postgres.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'backbench.db'}",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def fake_store() -> FakeAdminDataStore:
    """A store with the sample marketplace and one known student."""
    return FakeAdminDataStore(
        **sample_dashboard_rows(),
        student_results={STUDENT_ID: sample_student_stats_payload()},
    )


@pytest.fixture
def failing_store() -> FakeAdminDataStore:
    """A store whose every operation fails."""
    return FakeAdminDataStore(
        fail_on={
            "fetch_student_statuses",
            "fetch_merchant_statuses",
            "fetch_offer_statuses",
            "fetch_transaction_amounts",
            "get_student_admin_stats",
            "update_student_status",
        },
    )


@pytest.fixture
def stats_cache() -> StatsCache:
    """A fresh cache per test, so cached stats never leak across tests."""
    return StatsCache(ttl_seconds=60)


@pytest.fixture
def session_service() -> AdminSessionService:
    return AdminSessionService(
        secret=ADMIN_SECRET,
        max_age_seconds=settings.admin_session_max_age_seconds,
    )


@pytest.fixture
def admin_token(session_service: AdminSessionService) -> str:
    """A valid admin session token."""
    return session_service.login(ADMIN_SECRET)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest.fixture
def override_dependencies(
    session_service: AdminSessionService,
    stats_cache: StatsCache,
) -> Callable[[FakeAdminDataStore], None]:
    """Install dependency overrides for a given store."""

    def install(store: FakeAdminDataStore) -> None:
        async def override_get_store():
            yield store

        app.dependency_overrides[get_store] = override_get_store
        app.dependency_overrides[get_admin_session_service] = lambda: session_service
        app.dependency_overrides[get_stats_cache] = lambda: stats_cache

    return install


def _cookie_header(token: str) -> dict:
    # The session cookie is Secure, so it is sent explicitly over plain http
    return {"Cookie": f"{settings.admin_session_cookie}={token}"}


@pytest_asyncio.fixture
async def anonymous_client(
    fake_store: FakeAdminDataStore,
    override_dependencies,
) -> AsyncGenerator[AsyncClient, None]:
    """A client without an admin session."""
    override_dependencies(fake_store)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    fake_store: FakeAdminDataStore,
    admin_token: str,
    override_dependencies,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an admin-authenticated test client.

    This client:
    - Reads from the in-memory fake store
    - Carries a valid admin session cookie
    - Uses a per-test stats cache
    """
    override_dependencies(fake_store)

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers=_cookie_header(admin_token),
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_failing_store(
    failing_store: FakeAdminDataStore,
    admin_token: str,
    override_dependencies,
) -> AsyncGenerator[AsyncClient, None]:
    """An admin client whose store fails on every operation."""
    override_dependencies(failing_store)

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers=_cookie_header(admin_token),
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_without_raising(
    admin_token: str,
    override_dependencies,
) -> AsyncGenerator[AsyncClient, None]:
    """
    An admin client over a store returning malformed rows.

    Unhandled server errors come back as responses instead of being
    re-raised into the test.
    """
    override_dependencies(FakeAdminDataStore(transactions=[None]))

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers=_cookie_header(admin_token),
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
