from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RecentActivity:
    total_checks: int = 0
    successful_checks: int = 0
    last_checked_at: Optional[datetime] = None
    last_response_time_ms: Optional[int] = None

    def __post_init__(self):
        if self.total_checks < 0:
            raise ValueError(f"total_checks must be non-negative: {self.total_checks}")

        if not 0 <= self.successful_checks <= self.total_checks:
            raise ValueError(
                f"successful_checks must be between 0 and total_checks ({self.total_checks}): {self.successful_checks}"
            )

    @property
    def uptime_percentage(self) -> Optional[float]:
        if not self.total_checks:
            return None

        return round((self.successful_checks / self.total_checks) * 100, 2)
