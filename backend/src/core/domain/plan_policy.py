from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from core.exceptions.invalid_check_interval_error import InvalidCheckIntervalError


class PlanTier(str, Enum):
    FREE = "free"
    PRO = "pro"
    BUSINESS = "business"


class BadgePeriod(str, Enum):
    DAY = "24h"
    WEEK = "7d"
    MONTH = "30d"
    QUARTER = "90d"


@dataclass(frozen=True)
class PlanPolicy:
    tier: PlanTier
    max_monitors: int
    min_check_interval_seconds: int
    retention_days: int
    badge_periods: tuple[BadgePeriod, ...]
    webhooks_enabled: bool
    custom_domain_enabled: bool
    api_access_enabled: bool
    max_alerts_per_day: int
    ssl_monitoring_enabled: bool = False
    email_alerts_enabled: bool = True

    def __post_init__(self):
        ordered = tuple(period for period in BadgePeriod if period in self.badge_periods)
        object.__setattr__(self, "badge_periods", ordered)


PLAN_POLICIES: Mapping[PlanTier, PlanPolicy] = MappingProxyType(
    {
        PlanTier.FREE: PlanPolicy(
            tier=PlanTier.FREE,
            max_monitors=1,
            min_check_interval_seconds=300,
            retention_days=7,
            badge_periods=(BadgePeriod.DAY, BadgePeriod.WEEK),
            webhooks_enabled=False,
            custom_domain_enabled=False,
            api_access_enabled=False,
            max_alerts_per_day=5,
        ),
        PlanTier.PRO: PlanPolicy(
            tier=PlanTier.PRO,
            max_monitors=25,
            min_check_interval_seconds=60,
            retention_days=30,
            badge_periods=(BadgePeriod.DAY, BadgePeriod.WEEK, BadgePeriod.MONTH),
            webhooks_enabled=True,
            custom_domain_enabled=True,
            api_access_enabled=False,
            max_alerts_per_day=100,
            ssl_monitoring_enabled=True,
        ),
        PlanTier.BUSINESS: PlanPolicy(
            tier=PlanTier.BUSINESS,
            max_monitors=100,
            min_check_interval_seconds=30,
            retention_days=90,
            badge_periods=(BadgePeriod.DAY, BadgePeriod.WEEK, BadgePeriod.MONTH, BadgePeriod.QUARTER),
            webhooks_enabled=True,
            custom_domain_enabled=True,
            api_access_enabled=True,
            max_alerts_per_day=1000,
            ssl_monitoring_enabled=True,
        ),
    }
)


def _parse_tier(tier: Optional[str]) -> Optional[PlanTier]:
    if tier is None:
        return None

    try:
        return PlanTier(str(tier).strip().lower())
    except ValueError:
        return None


def is_known_tier(tier: Optional[str]) -> bool:
    return _parse_tier(tier) is not None


def resolve_policy(tier: Optional[str]) -> PlanPolicy:
    return PLAN_POLICIES[_parse_tier(tier) or PlanTier.FREE]


def can_add_monitor(policy: PlanPolicy, current_count: int) -> bool:
    return current_count < policy.max_monitors


def remaining_monitors(policy: PlanPolicy, current_count: int) -> int:
    return max(policy.max_monitors - current_count, 0)


def validate_check_interval(policy: PlanPolicy, requested_interval_seconds: int) -> None:
    if requested_interval_seconds < policy.min_check_interval_seconds:
        raise InvalidCheckIntervalError(
            tier=policy.tier.value,
            requested_seconds=requested_interval_seconds,
            minimum_seconds=policy.min_check_interval_seconds,
        )
