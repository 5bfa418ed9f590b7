from dataclasses import dataclass
from datetime import date, datetime, timezone


def as_calendar_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)

        return value.date()

    return value


@dataclass(frozen=True)
class DailyAggregate:
    date: date
    total_checks: int
    successful_checks: int
    uptime_percentage: float

    def __post_init__(self):
        if isinstance(self.date, datetime):
            raise ValueError(f"DailyAggregate date must be a calendar day, got timestamp: {self.date}")

        if self.total_checks < 0:
            raise ValueError(f"total_checks must be non-negative: {self.total_checks}")

        if not 0 <= self.successful_checks <= self.total_checks:
            raise ValueError(
                f"successful_checks must be between 0 and total_checks ({self.total_checks}): {self.successful_checks}"
            )

        if not 0 <= self.uptime_percentage <= 100:
            raise ValueError(f"uptime_percentage must be between 0 and 100: {self.uptime_percentage}")
