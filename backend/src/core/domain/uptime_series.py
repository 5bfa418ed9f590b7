from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from core.domain.daily_aggregate import DailyAggregate
from core.domain.display_day import DisplayDay


@dataclass(frozen=True)
class SeriesSummary:
    window_days: int
    monitored_days: int
    total_checks: int
    successful_checks: int
    average_uptime: float


def densify(raw_aggregates: Iterable[DailyAggregate], retention_days: int, today: date) -> list[DisplayDay]:
    """Expand sparse daily aggregates into one entry per day of the retention window.

    The window is ``[today - (retention_days - 1), today]``, oldest first. Days without an
    aggregate are reported as unmonitored instead of as zero uptime. Aggregates outside the
    window are ignored and, for duplicate dates, the first aggregate wins.
    """
    if retention_days <= 0:
        return []

    start_date = today - timedelta(days=retention_days - 1)

    by_date: dict[date, DailyAggregate] = {}
    for aggregate in raw_aggregates:
        if start_date <= aggregate.date <= today:
            by_date.setdefault(aggregate.date, aggregate)

    days: list[DisplayDay] = []
    for offset in range(retention_days):
        day = start_date + timedelta(days=offset)
        aggregate = by_date.get(day)

        if aggregate is None:
            days.append(DisplayDay.unmonitored(day))
        else:
            days.append(DisplayDay.monitored(aggregate))

    return days


def summarize(days: Iterable[DisplayDay]) -> SeriesSummary:
    """Average uptime only counts monitored days; a window with none reports 0.0."""
    window_days = 0
    monitored_days = 0
    total_checks = 0
    successful_checks = 0
    uptime_sum = 0.0

    for day in days:
        window_days += 1
        total_checks += day.total_checks
        successful_checks += day.successful_checks

        if day.is_monitored:
            monitored_days += 1
            uptime_sum += day.uptime_percentage

    average_uptime = uptime_sum / monitored_days if monitored_days else 0.0

    return SeriesSummary(
        window_days=window_days,
        monitored_days=monitored_days,
        total_checks=total_checks,
        successful_checks=successful_checks,
        average_uptime=average_uptime,
    )
