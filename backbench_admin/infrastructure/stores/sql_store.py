"""SQLAlchemy implementation of AdminDataStore."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy import Select, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backbench_admin.core.metrics import record_store_failure, track_store_latency
from backbench_admin.domain.exceptions import DataStoreException
from backbench_admin.domain.interfaces import AdminDataStore, Row
from backbench_admin.infrastructure.database.models import (
    MerchantModel,
    OfferModel,
    OnlineBrandModel,
    OnlineOfferModel,
    OnlineRedemptionModel,
    StudentModel,
    TransactionModel,
)

logger = structlog.get_logger(__name__)


def _jsonable(value: Any) -> Any:
    """Render column values the way the REST API would serialize them."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


def _row(mapping) -> Row:
    return {key: _jsonable(value) for key, value in mapping.items()}


class SqlAdminDataStore(AdminDataStore):
    """
    Reads the marketplace tables directly with SQLAlchemy.

    Each operation opens its own session, so the dashboard's concurrent
    reads never share one. The student aggregation runs inside a single
    transaction at ``snapshot_isolation`` so the student row and both
    histories come from one snapshot.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        snapshot_isolation: str | None = "REPEATABLE READ",
    ):
        self._session_factory = session_factory
        self._snapshot_isolation = snapshot_isolation

    async def fetch_student_statuses(self) -> List[Row]:
        return await self._fetch_all("select_students", select(StudentModel.status))

    async def fetch_merchant_statuses(self) -> List[Row]:
        return await self._fetch_all("select_merchants", select(MerchantModel.status))

    async def fetch_offer_statuses(self) -> List[Row]:
        return await self._fetch_all("select_offers", select(OfferModel.status))

    async def fetch_transaction_amounts(self) -> List[Row]:
        stmt = select(
            TransactionModel.final_amount,
            TransactionModel.discount_amount,
            TransactionModel.redeemed_at,
        )
        return await self._fetch_all("select_transactions", stmt)

    async def get_student_admin_stats(self, student_id: str) -> Optional[Row]:
        operation = "get_student_admin_stats"
        try:
            with track_store_latency(operation):
                async with self._session_factory() as session, session.begin():
                    if self._snapshot_isolation:
                        await session.connection(
                            execution_options={"isolation_level": self._snapshot_isolation}
                        )
                    return await self._aggregate_student(session, student_id)
        except SQLAlchemyError as e:
            raise self._store_error(operation, e) from e

    async def update_student_status(
        self,
        student_id: str,
        status: str,
    ) -> Optional[Row]:
        operation = "update_student_status"
        stmt = (
            update(StudentModel)
            .where(StudentModel.id == student_id)
            .values(status=status)
            .returning(StudentModel.id, StudentModel.status)
        )
        try:
            with track_store_latency(operation):
                async with self._session_factory() as session, session.begin():
                    result = await session.execute(stmt)
                    updated = result.mappings().first()
        except SQLAlchemyError as e:
            raise self._store_error(operation, e) from e

        return _row(updated) if updated is not None else None

    async def _fetch_all(self, operation: str, stmt: Select) -> List[Row]:
        try:
            with track_store_latency(operation):
                async with self._session_factory() as session:
                    result = await session.execute(stmt)
                    return [_row(mapping) for mapping in result.mappings().all()]
        except SQLAlchemyError as e:
            raise self._store_error(operation, e) from e

    async def _aggregate_student(
        self,
        session: AsyncSession,
        student_id: str,
    ) -> Row:
        """Build the same nested payload as the stored procedure."""
        student_stmt = select(
            StudentModel.id,
            StudentModel.name,
            StudentModel.email,
            StudentModel.bb_id,
            StudentModel.profile_image_url.label("profile_image"),
            StudentModel.college,
            StudentModel.city,
            StudentModel.state,
            StudentModel.gender,
            StudentModel.dob,
            StudentModel.status,
            StudentModel.created_at,
            StudentModel.total_redemptions,
        ).where(StudentModel.id == student_id)

        student = (await session.execute(student_stmt)).mappings().first()
        if student is None:
            return {"success": False, "error": "Student not found"}

        offline_stmt = (
            select(
                TransactionModel.id,
                TransactionModel.student_id,
                TransactionModel.merchant_id,
                func.coalesce(
                    MerchantModel.business_name,
                    TransactionModel.merchant_name,
                ).label("merchant_name"),
                func.coalesce(
                    OfferModel.title,
                    TransactionModel.offer_title,
                ).label("offer_title"),
                TransactionModel.discount_amount,
                TransactionModel.final_amount,
                TransactionModel.redeemed_at,
            )
            .outerjoin(MerchantModel, MerchantModel.id == TransactionModel.merchant_id)
            .outerjoin(OfferModel, OfferModel.id == TransactionModel.offer_id)
            .where(TransactionModel.student_id == student_id)
            .order_by(TransactionModel.redeemed_at.desc())
        )
        offline = [
            _row(mapping)
            for mapping in (await session.execute(offline_stmt)).mappings().all()
        ]

        online_stmt = (
            select(
                OnlineRedemptionModel.id,
                OnlineRedemptionModel.offer_id,
                OnlineRedemptionModel.code_used,
                OnlineRedemptionModel.revealed_at,
                OnlineRedemptionModel.created_at,
                OnlineRedemptionModel.status,
                OnlineOfferModel.title.label("offer_title"),
                OnlineOfferModel.code.label("offer_code"),
                OnlineBrandModel.name.label("brand_name"),
                OnlineBrandModel.logo_url.label("brand_logo"),
            )
            .outerjoin(OnlineOfferModel, OnlineOfferModel.id == OnlineRedemptionModel.offer_id)
            .outerjoin(
                OnlineBrandModel,
                OnlineBrandModel.id
                == func.coalesce(OnlineRedemptionModel.brand_id, OnlineOfferModel.brand_id),
            )
            .where(OnlineRedemptionModel.student_id == student_id)
            .order_by(OnlineRedemptionModel.created_at.desc())
        )
        online = [
            _row(mapping)
            for mapping in (await session.execute(online_stmt)).mappings().all()
        ]

        total_savings = sum(
            (row["discount_amount"] or 0 for row in offline),
            0,
        )

        stats: Dict[str, Any] = {
            "totalSavings": round(total_savings, 2),
            "offlineCount": len(offline),
            "onlineCount": len(online),
        }

        return {
            "success": True,
            "data": {
                "student": _row(student),
                "offlineTransactions": offline,
                "onlineRedemptions": online,
                "stats": stats,
            },
        }

    @staticmethod
    def _store_error(operation: str, error: SQLAlchemyError) -> DataStoreException:
        record_store_failure(operation, "error")
        logger.error(
            "store_query_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        return DataStoreException(
            message=f"Data store query failed: {type(error).__name__}",
            operation=operation,
        )
