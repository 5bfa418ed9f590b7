from typing import Optional

from pydantic import Field

from core.domain.plan_policy import BadgePeriod, PlanPolicy, PlanTier
from infra.utils.formatters import format_interval
from infra.web.routers.schemas import CamelModel
from use_cases.plan.get_plan_features_use_case import PlanFeatures


class PlanPolicyResponseDTO(CamelModel):
    plan: PlanTier
    max_monitors: int
    min_check_interval_seconds: int
    min_check_interval_label: str
    retention_days: int
    badge_periods: list[BadgePeriod]
    webhooks_enabled: bool
    custom_domain_enabled: bool
    api_access_enabled: bool
    ssl_monitoring_enabled: bool
    email_alerts_enabled: bool
    max_alerts_per_day: int

    @classmethod
    def from_policy(cls, policy: PlanPolicy) -> "PlanPolicyResponseDTO":
        return cls(
            plan=policy.tier,
            max_monitors=policy.max_monitors,
            min_check_interval_seconds=policy.min_check_interval_seconds,
            min_check_interval_label=format_interval(policy.min_check_interval_seconds),
            retention_days=policy.retention_days,
            badge_periods=list(policy.badge_periods),
            webhooks_enabled=policy.webhooks_enabled,
            custom_domain_enabled=policy.custom_domain_enabled,
            api_access_enabled=policy.api_access_enabled,
            ssl_monitoring_enabled=policy.ssl_monitoring_enabled,
            email_alerts_enabled=policy.email_alerts_enabled,
            max_alerts_per_day=policy.max_alerts_per_day,
        )


class PlanFeaturesResponseDTO(CamelModel):
    policy: PlanPolicyResponseDTO
    current_monitor_count: int
    remaining_monitors: int
    can_add_monitor: bool

    @classmethod
    def from_features(cls, features: PlanFeatures) -> "PlanFeaturesResponseDTO":
        return cls(
            policy=PlanPolicyResponseDTO.from_policy(features.policy),
            current_monitor_count=features.current_monitor_count,
            remaining_monitors=features.remaining_monitors,
            can_add_monitor=features.can_add_monitor,
        )


class MonitorEligibilityRequestDTO(CamelModel):
    check_interval_seconds: Optional[int] = Field(default=None, ge=1)


class MonitorEligibilityResponseDTO(CamelModel):
    allowed: bool
    plan: PlanTier
