from enum import Enum
from typing import Optional


class ThemeChoice(str, Enum):
    CYBERPUNK = "cyberpunk"
    MATRIX = "matrix"
    RETRO = "retro"
    MINIMAL = "minimal"


SYSTEM_DEFAULT_THEME = ThemeChoice.CYBERPUNK


def resolve_theme(
    owner_default: Optional[ThemeChoice],
    viewer_override: Optional[ThemeChoice],
) -> ThemeChoice:
    # A viewer override wins even when the viewer owns the page.
    if viewer_override is not None:
        return ThemeChoice(viewer_override)

    if owner_default is not None:
        return ThemeChoice(owner_default)

    return SYSTEM_DEFAULT_THEME
