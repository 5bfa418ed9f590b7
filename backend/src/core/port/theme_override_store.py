from abc import ABC, abstractmethod
from typing import Optional

from core.domain.theme import ThemeChoice


class ThemeOverrideStore(ABC):
    """Per-viewer theme overrides, keyed by status page slug.

    The viewer is implied by the store instance, so one store never sees another viewer's overrides.
    """

    @abstractmethod
    async def get(self, slug: str) -> Optional[ThemeChoice]:
        raise NotImplementedError

    @abstractmethod
    async def set(self, slug: str, theme: ThemeChoice) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, slug: str) -> None:
        raise NotImplementedError
