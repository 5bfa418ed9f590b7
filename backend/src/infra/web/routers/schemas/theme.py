from typing import Optional

from core.domain.theme import ThemeChoice
from infra.web.routers.schemas import CamelModel


class ThemeUpdateDTO(CamelModel):
    theme: ThemeChoice


class ThemeResponseDTO(CamelModel):
    theme: ThemeChoice
    owner_default: Optional[ThemeChoice] = None
    viewer_override: Optional[ThemeChoice] = None
