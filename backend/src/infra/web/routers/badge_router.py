from fastapi import APIRouter, HTTPException, Query, status

from core.domain.badge import BadgeArtifact
from core.domain.plan_policy import BadgePeriod
from core.exceptions.invalid_period_error import InvalidPeriodError
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from infra.adapter.postgres_account_repository import get_account_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.config.config import get_config
from infra.web.routers.schemas.badge import BadgeResponseDTO
from use_cases.badge.build_badge_use_case import BuildBadgeUseCase

router = APIRouter(prefix="/badge", tags=["Badge"])


@router.get(
    "/{slug}",
    response_model=BadgeResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_badge(slug: str, period: str = Query(default=BadgePeriod.DAY.value)) -> BadgeArtifact:
    use_case = BuildBadgeUseCase(get_status_page_repository(), get_account_repository())

    try:
        return await use_case.execute(origin=get_config().PUBLIC_ORIGIN, slug=slug, period=period)
    except StatusPageNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Status page not found")
    except InvalidPeriodError as error:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={
                "message": f"Badge period '{error.period}' requires a plan upgrade",
                "period": error.period,
                "allowedPeriods": error.allowed_periods,
            },
        )
