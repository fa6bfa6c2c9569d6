"""BaaS REST implementation of AdminDataStore."""

from typing import Any, Dict, List, Optional

import httpx
import structlog

from backbench_admin.core.config import settings
from backbench_admin.core.metrics import record_store_failure, track_store_latency
from backbench_admin.domain.exceptions import DataStoreException, StoreTimeoutException
from backbench_admin.domain.interfaces import AdminDataStore, Row

logger = structlog.get_logger(__name__)


class RestAdminDataStore(AdminDataStore):
    """
    HTTP client for the backend-as-a-service REST API.

    Reads tables through ``/rest/v1/<table>`` and calls stored procedures
    through ``/rest/v1/rpc/<name>`` with the service-role key, which
    bypasses row-level security. Requests are not retried.
    """

    STUDENT_STATS_PROCEDURE = "get_student_admin_stats"

    def __init__(
        self,
        base_url: str | None = None,
        service_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.supabase_url).rstrip("/")
        self._service_key = service_key if service_key is not None else settings.supabase_service_role_key
        self._timeout = timeout or settings.store_timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/rest/v1",
            timeout=self._timeout,
            transport=transport,
            headers={
                "apikey": self._service_key,
                "Authorization": f"Bearer {self._service_key}",
                "Accept": "application/json",
            },
        )

    async def fetch_student_statuses(self) -> List[Row]:
        return await self._select("students", "status")

    async def fetch_merchant_statuses(self) -> List[Row]:
        return await self._select("merchants", "status")

    async def fetch_offer_statuses(self) -> List[Row]:
        return await self._select("offers", "status")

    async def fetch_transaction_amounts(self) -> List[Row]:
        return await self._select(
            "transactions",
            "final_amount,discount_amount,redeemed_at",
        )

    async def get_student_admin_stats(self, student_id: str) -> Optional[Row]:
        return await self._request(
            self.STUDENT_STATS_PROCEDURE,
            "POST",
            f"/rpc/{self.STUDENT_STATS_PROCEDURE}",
            json={"target_student_id": student_id},
        )

    async def update_student_status(
        self,
        student_id: str,
        status: str,
    ) -> Optional[Row]:
        rows = await self._request(
            "update_student_status",
            "PATCH",
            "/students",
            params={"id": f"eq.{student_id}", "select": "id,status"},
            json={"status": status},
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            return None
        return rows[0]

    async def close(self) -> None:
        await self._client.aclose()

    async def _select(self, table: str, columns: str) -> List[Row]:
        rows = await self._request(
            f"select_{table}",
            "GET",
            f"/{table}",
            params={"select": columns},
        )
        return rows or []

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Any:
        """
        Send one request and decode its JSON body.

        Raises:
            StoreTimeoutException: If the request times out
            DataStoreException: On transport errors or a 4xx/5xx response
        """
        try:
            with track_store_latency(operation):
                response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            record_store_failure(operation, "timeout")
            logger.warning("store_timeout", operation=operation, timeout=self._timeout)
            raise StoreTimeoutException(operation, self._timeout)
        except httpx.HTTPError as e:
            record_store_failure(operation, "error")
            logger.error("store_transport_error", operation=operation, error=str(e))
            raise DataStoreException(
                message=f"Data store unreachable: {e}",
                operation=operation,
            ) from e

        if response.status_code >= 400:
            record_store_failure(operation, "error")
            logger.error(
                "store_request_failed",
                operation=operation,
                status_code=response.status_code,
                response=response.text[:200],
            )
            raise DataStoreException(
                message=self._error_message(response),
                operation=operation,
                status_code=response.status_code,
            )

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body: Dict[str, Any] = response.json()
        except ValueError:
            return f"Data store error: HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"Data store error: HTTP {response.status_code}"
