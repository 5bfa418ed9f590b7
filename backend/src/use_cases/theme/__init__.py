from use_cases.theme.clear_viewer_theme_override_use_case import ClearViewerThemeOverrideUseCase
from use_cases.theme.resolve_viewer_theme_use_case import ResolveViewerThemeUseCase, ThemeResolution
from use_cases.theme.set_owner_default_theme_use_case import SetOwnerDefaultThemeUseCase
from use_cases.theme.set_viewer_theme_override_use_case import SetViewerThemeOverrideUseCase

__all__ = [
    "ClearViewerThemeOverrideUseCase",
    "ResolveViewerThemeUseCase",
    "SetOwnerDefaultThemeUseCase",
    "SetViewerThemeOverrideUseCase",
    "ThemeResolution",
]
