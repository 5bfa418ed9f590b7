from use_cases.badge.build_badge_use_case import BuildBadgeUseCase

__all__ = ["BuildBadgeUseCase"]
