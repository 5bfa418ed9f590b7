from use_cases.plan.authorize_monitor_creation_use_case import AuthorizeMonitorCreationUseCase
from use_cases.plan.get_plan_features_use_case import GetPlanFeaturesUseCase, PlanFeatures
from use_cases.plan.resolve_account_policy_use_case import ResolveAccountPolicyUseCase

__all__ = [
    "AuthorizeMonitorCreationUseCase",
    "GetPlanFeaturesUseCase",
    "PlanFeatures",
    "ResolveAccountPolicyUseCase",
]
