from dataclasses import dataclass
from typing import Optional

from core.domain.status_page import StatusPage
from core.domain.theme import ThemeChoice, resolve_theme
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from core.port.status_page_repository import StatusPageRepository
from core.port.theme_override_store import ThemeOverrideStore


@dataclass(frozen=True)
class ThemeResolution:
    theme: ThemeChoice
    owner_default: Optional[ThemeChoice]
    viewer_override: Optional[ThemeChoice]


class ResolveViewerThemeUseCase:
    def __init__(
        self,
        status_page_repository: StatusPageRepository,
        theme_override_store: ThemeOverrideStore,
    ) -> None:
        self.status_page_repository = status_page_repository
        self.theme_override_store = theme_override_store

    async def execute(self, slug: str) -> ThemeResolution:
        status_page = await self.status_page_repository.find_by_slug(slug)

        if not status_page:
            raise StatusPageNotFoundError(slug)

        return await self.resolve_for(status_page)

    async def resolve_for(self, status_page: StatusPage) -> ThemeResolution:
        viewer_override = await self.theme_override_store.get(status_page.slug)

        return ThemeResolution(
            theme=resolve_theme(status_page.theme, viewer_override),
            owner_default=status_page.theme,
            viewer_override=viewer_override,
        )
