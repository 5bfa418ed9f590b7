from core.domain.theme import ThemeChoice
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from core.port.status_page_repository import StatusPageRepository
from core.port.theme_override_store import ThemeOverrideStore


class SetViewerThemeOverrideUseCase:
    def __init__(
        self,
        status_page_repository: StatusPageRepository,
        theme_override_store: ThemeOverrideStore,
    ) -> None:
        self.status_page_repository = status_page_repository
        self.theme_override_store = theme_override_store

    async def execute(self, slug: str, theme: ThemeChoice) -> ThemeChoice:
        if not await self.status_page_repository.find_by_slug(slug):
            raise StatusPageNotFoundError(slug)

        theme = ThemeChoice(theme)
        await self.theme_override_store.set(slug, theme)

        return theme
