from typing import Optional

import structlog

from core.domain.plan_policy import PlanPolicy, validate_check_interval
from core.exceptions.monitor_quota_exceeded_error import MonitorQuotaExceededError
from core.port.account_repository import AccountRepository
from core.port.status_page_repository import StatusPageRepository
from use_cases.plan.get_plan_features_use_case import GetPlanFeaturesUseCase

logger = structlog.stdlib.get_logger(__name__)


class AuthorizeMonitorCreationUseCase:
    def __init__(
        self,
        account_repository: AccountRepository,
        status_page_repository: StatusPageRepository,
    ) -> None:
        self.get_plan_features_use_case = GetPlanFeaturesUseCase(account_repository, status_page_repository)

    async def execute(self, account_id: int, check_interval_seconds: Optional[int] = None) -> PlanPolicy:
        features = await self.get_plan_features_use_case.execute(account_id)
        policy = features.policy

        if not features.can_add_monitor:
            logger.info(
                "monitor_creation_blocked",
                account_id=account_id,
                tier=policy.tier.value,
                current_monitor_count=features.current_monitor_count,
                max_monitors=policy.max_monitors,
            )
            raise MonitorQuotaExceededError(tier=policy.tier.value, max_monitors=policy.max_monitors)

        if check_interval_seconds is not None:
            validate_check_interval(policy, check_interval_seconds)

        return policy
