from dataclasses import dataclass

from core.domain.plan_policy import PlanPolicy, can_add_monitor, remaining_monitors
from core.port.account_repository import AccountRepository
from core.port.status_page_repository import StatusPageRepository
from use_cases.plan.resolve_account_policy_use_case import ResolveAccountPolicyUseCase


@dataclass(frozen=True)
class PlanFeatures:
    policy: PlanPolicy
    current_monitor_count: int
    remaining_monitors: int
    can_add_monitor: bool


class GetPlanFeaturesUseCase:
    def __init__(
        self,
        account_repository: AccountRepository,
        status_page_repository: StatusPageRepository,
    ) -> None:
        self.resolve_policy_use_case = ResolveAccountPolicyUseCase(account_repository)
        self.status_page_repository = status_page_repository

    async def execute(self, account_id: int) -> PlanFeatures:
        policy = await self.resolve_policy_use_case.execute(account_id)
        current_count = await self.status_page_repository.count_by_owner(account_id)

        return PlanFeatures(
            policy=policy,
            current_monitor_count=current_count,
            remaining_monitors=remaining_monitors(policy, current_count),
            can_add_monitor=can_add_monitor(policy, current_count),
        )
