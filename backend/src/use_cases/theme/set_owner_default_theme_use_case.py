from typing import Optional

import structlog

from core.domain.status_page import StatusPage
from core.domain.theme import ThemeChoice
from core.exceptions.not_status_page_owner_error import NotStatusPageOwnerError
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from core.port.status_page_repository import StatusPageRepository
from core.port.theme_override_store import ThemeOverrideStore

logger = structlog.stdlib.get_logger(__name__)


class SetOwnerDefaultThemeUseCase:
    def __init__(
        self,
        status_page_repository: StatusPageRepository,
        theme_override_store: ThemeOverrideStore,
    ) -> None:
        self.status_page_repository = status_page_repository
        self.theme_override_store = theme_override_store

    async def execute(self, slug: str, account_id: Optional[int], theme: ThemeChoice) -> StatusPage:
        status_page = await self.status_page_repository.find_by_slug(slug)

        if not status_page:
            raise StatusPageNotFoundError(slug)

        if not status_page.is_owned_by(account_id):
            raise NotStatusPageOwnerError(slug, account_id)

        # The override store is scoped to the owner, so only their own override is cleared.
        # Between these two writes a concurrent read by the owner can still see the old override.
        updated = await self.status_page_repository.update_theme(status_page.id, ThemeChoice(theme))
        await self.theme_override_store.delete(slug)

        logger.info(
            "owner_default_theme_updated",
            slug=slug,
            account_id=account_id,
            previous_theme=status_page.theme,
            theme=updated.theme,
        )

        return updated
