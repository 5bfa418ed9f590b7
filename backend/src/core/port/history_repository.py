from abc import ABC, abstractmethod
from datetime import date, datetime

from core.domain.daily_aggregate import DailyAggregate
from core.domain.recent_activity import RecentActivity


class HistoryRepository(ABC):
    @abstractmethod
    async def get_daily_aggregates(self, status_page_id: int, since: date, until: date) -> list[DailyAggregate]:
        raise NotImplementedError

    @abstractmethod
    async def get_recent_activity(self, status_page_id: int, since: datetime, until: datetime) -> RecentActivity:
        """Checks in ``(since, until]`` plus the latest check at or before ``until``."""
        raise NotImplementedError
