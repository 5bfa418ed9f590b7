from enum import Enum
from typing import Optional


class LiveStatus(str, Enum):
    OPERATIONAL = "OPERATIONAL"
    DEGRADED = "DEGRADED"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"

    @property
    def headline(self) -> str:
        mapping = {
            LiveStatus.OPERATIONAL: "All Systems Operational",
            LiveStatus.DEGRADED: "Degraded Performance",
            LiveStatus.DOWN: "Service Down",
            LiveStatus.UNKNOWN: "Awaiting First Check",
        }

        return mapping[self]

    @classmethod
    def from_status_code(cls, status_code: Optional[int]) -> "LiveStatus":
        if status_code is None:
            return cls.UNKNOWN

        if 200 <= status_code < 300:
            return cls.OPERATIONAL

        if 300 <= status_code < 400:
            return cls.DEGRADED

        return cls.DOWN
