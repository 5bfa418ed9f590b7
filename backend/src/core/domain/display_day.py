from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.daily_aggregate import DailyAggregate
from core.domain.severity import UptimeSeverity, classify_uptime


@dataclass(frozen=True)
class DisplayDay:
    date: date
    is_monitored: bool
    uptime_percentage: float = 0.0
    total_checks: int = 0
    successful_checks: int = 0

    @classmethod
    def monitored(cls, aggregate: DailyAggregate) -> "DisplayDay":
        return cls(
            date=aggregate.date,
            is_monitored=True,
            uptime_percentage=aggregate.uptime_percentage,
            total_checks=aggregate.total_checks,
            successful_checks=aggregate.successful_checks,
        )

    @classmethod
    def unmonitored(cls, day: date) -> "DisplayDay":
        return cls(date=day, is_monitored=False)

    @property
    def severity(self) -> Optional[UptimeSeverity]:
        if not self.is_monitored:
            return None

        return classify_uptime(self.uptime_percentage)

    @property
    def severity_label(self) -> Optional[str]:
        severity = self.severity

        return severity.label if severity is not None else None
