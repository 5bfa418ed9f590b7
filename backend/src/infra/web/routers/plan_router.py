from fastapi import APIRouter, Depends, HTTPException, status

from core.exceptions.invalid_check_interval_error import InvalidCheckIntervalError
from core.exceptions.monitor_quota_exceeded_error import MonitorQuotaExceededError
from infra.adapter.postgres_account_repository import get_account_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.web.deps import require_account_id
from infra.web.routers.schemas.plan import (
    MonitorEligibilityRequestDTO,
    MonitorEligibilityResponseDTO,
    PlanFeaturesResponseDTO,
)
from use_cases.plan.authorize_monitor_creation_use_case import AuthorizeMonitorCreationUseCase
from use_cases.plan.get_plan_features_use_case import GetPlanFeaturesUseCase

router = APIRouter(prefix="/plan", tags=["Plan"])


@router.get(
    "/features",
    response_model=PlanFeaturesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_plan_features(account_id: int = Depends(require_account_id)) -> PlanFeaturesResponseDTO:
    use_case = GetPlanFeaturesUseCase(get_account_repository(), get_status_page_repository())
    features = await use_case.execute(account_id)

    return PlanFeaturesResponseDTO.from_features(features)


@router.post(
    "/monitor-eligibility",
    response_model=MonitorEligibilityResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def check_monitor_eligibility(
    payload: MonitorEligibilityRequestDTO,
    account_id: int = Depends(require_account_id),
) -> MonitorEligibilityResponseDTO:
    use_case = AuthorizeMonitorCreationUseCase(get_account_repository(), get_status_page_repository())

    try:
        policy = await use_case.execute(account_id, check_interval_seconds=payload.check_interval_seconds)
    except MonitorQuotaExceededError as error:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Monitor limit reached: your {error.tier} plan allows {error.max_monitors} monitors",
        )
    except InvalidCheckIntervalError as error:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error))

    return MonitorEligibilityResponseDTO(allowed=True, plan=policy.tier)
