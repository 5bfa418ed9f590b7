from datetime import date, datetime, time, timedelta, timezone
from functools import lru_cache

from sqlalchemy import Integer, RowMapping, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.daily_aggregate import DailyAggregate, as_calendar_day
from core.domain.recent_activity import RecentActivity
from core.port.history_repository import HistoryRepository
from infra.db.models import HealthcheckLogModel
from infra.db.session import get_session_factory
from infra.db.types import utc_day


def _successful_checks_expr():
    return func.sum(case((HealthcheckLogModel.is_successful.is_(True), 1), else_=0), type_=Integer)


class PostgresHistoryRepository(HistoryRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def get_daily_aggregates(self, status_page_id: int, since: date, until: date) -> list[DailyAggregate]:
        if until < since:
            return []

        window_start = datetime.combine(since, time.min, tzinfo=timezone.utc)
        window_end = datetime.combine(until + timedelta(days=1), time.min, tzinfo=timezone.utc)

        summary_date_expr = utc_day(HealthcheckLogModel.checked_at).label("summary_date")
        total_checks_expr = func.count(HealthcheckLogModel.id).label("total_checks")
        successful_checks_expr = _successful_checks_expr().label("successful_checks")

        statement = (
            select(summary_date_expr, total_checks_expr, successful_checks_expr)
            .where(HealthcheckLogModel.status_page_id == status_page_id)
            .where(HealthcheckLogModel.checked_at >= window_start)
            .where(HealthcheckLogModel.checked_at < window_end)
            .group_by(summary_date_expr)
            .order_by(summary_date_expr.asc())
        )

        async with self._session_factory() as session:
            rows = (await session.execute(statement)).mappings().all()

            return [self._to_daily_aggregate(row) for row in rows]

    async def get_recent_activity(self, status_page_id: int, since: datetime, until: datetime) -> RecentActivity:
        totals_statement = (
            select(
                func.count(HealthcheckLogModel.id).label("total_checks"),
                _successful_checks_expr().label("successful_checks"),
            )
            .where(HealthcheckLogModel.status_page_id == status_page_id)
            .where(HealthcheckLogModel.checked_at > since)
            .where(HealthcheckLogModel.checked_at <= until)
        )
        latest_statement = (
            select(HealthcheckLogModel.checked_at, HealthcheckLogModel.response_time_ms)
            .where(HealthcheckLogModel.status_page_id == status_page_id)
            .where(HealthcheckLogModel.checked_at <= until)
            .order_by(HealthcheckLogModel.checked_at.desc(), HealthcheckLogModel.id.desc())
            .limit(1)
        )

        async with self._session_factory() as session:
            totals = (await session.execute(totals_statement)).mappings().one()
            latest = (await session.execute(latest_statement)).mappings().one_or_none()

        return RecentActivity(
            total_checks=int(totals["total_checks"] or 0),
            successful_checks=int(totals["successful_checks"] or 0),
            last_checked_at=latest["checked_at"] if latest else None,
            last_response_time_ms=latest["response_time_ms"] if latest else None,
        )

    def _to_daily_aggregate(self, row: RowMapping) -> DailyAggregate:
        raw_summary_date = row["summary_date"]

        summary_date: date
        if isinstance(raw_summary_date, (date, datetime)):
            summary_date = as_calendar_day(raw_summary_date)
        else:
            summary_date = date.fromisoformat(str(raw_summary_date))

        total_checks = int(row["total_checks"])
        successful_checks = int(row["successful_checks"] or 0)
        uptime = round((successful_checks / total_checks) * 100, 2) if total_checks else 0.0

        return DailyAggregate(
            date=summary_date,
            total_checks=total_checks,
            successful_checks=successful_checks,
            uptime_percentage=uptime,
        )


@lru_cache
def get_history_repository() -> HistoryRepository:
    session_factory = get_session_factory()

    return PostgresHistoryRepository(session_factory=session_factory)
