from abc import ABC, abstractmethod
from typing import Optional

from core.domain.status_page import StatusPage
from core.domain.theme import ThemeChoice


class StatusPageRepository(ABC):
    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[StatusPage]:
        raise NotImplementedError

    @abstractmethod
    async def update_theme(self, status_page_id: int, theme: ThemeChoice) -> StatusPage:
        raise NotImplementedError

    @abstractmethod
    async def count_by_owner(self, owner_account_id: int) -> int:
        raise NotImplementedError
