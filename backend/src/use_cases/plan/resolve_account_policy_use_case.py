import structlog

from core.domain.plan_policy import PlanPolicy, is_known_tier, resolve_policy
from core.port.account_repository import AccountRepository

logger = structlog.stdlib.get_logger(__name__)


class ResolveAccountPolicyUseCase:
    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def execute(self, account_id: int) -> PlanPolicy:
        tier = await self.account_repository.get_plan(account_id)

        if not is_known_tier(tier):
            logger.warning("unknown_plan_tier", account_id=account_id, tier=tier, fallback="free")

        return resolve_policy(tier)
