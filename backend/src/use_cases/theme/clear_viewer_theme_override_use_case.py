from core.port.theme_override_store import ThemeOverrideStore


class ClearViewerThemeOverrideUseCase:
    def __init__(self, theme_override_store: ThemeOverrideStore) -> None:
        self.theme_override_store = theme_override_store

    async def execute(self, slug: str) -> None:
        await self.theme_override_store.delete(slug)
