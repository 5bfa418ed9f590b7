from core.domain.badge import BadgeArtifact, build_badge
from core.domain.plan_policy import BadgePeriod
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from core.port.account_repository import AccountRepository
from core.port.status_page_repository import StatusPageRepository
from use_cases.plan.resolve_account_policy_use_case import ResolveAccountPolicyUseCase


class BuildBadgeUseCase:
    def __init__(
        self,
        status_page_repository: StatusPageRepository,
        account_repository: AccountRepository,
    ) -> None:
        self.status_page_repository = status_page_repository
        self.resolve_policy_use_case = ResolveAccountPolicyUseCase(account_repository)

    async def execute(self, origin: str, slug: str, period: BadgePeriod | str) -> BadgeArtifact:
        status_page = await self.status_page_repository.find_by_slug(slug)

        if not status_page:
            raise StatusPageNotFoundError(slug)

        policy = await self.resolve_policy_use_case.execute(status_page.owner_account_id)

        return build_badge(origin, status_page.slug, period, policy.badge_periods)
