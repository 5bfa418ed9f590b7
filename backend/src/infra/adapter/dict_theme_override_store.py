import asyncio
from collections import OrderedDict
from functools import lru_cache
from typing import Optional

from core.domain.theme import ThemeChoice
from core.port.theme_override_store import ThemeOverrideStore
from infra.config.config import get_config


class DictThemeOverrideStore(ThemeOverrideStore):
    """Per-viewer view over a shared, least-recently-used bounded override map."""

    def __init__(
        self,
        viewer_id: str,
        overrides: Optional[OrderedDict[tuple[str, str], ThemeChoice]] = None,
        lock: Optional[asyncio.Lock] = None,
        max_entries: Optional[int] = None,
    ) -> None:
        self.viewer_id = viewer_id
        self.max_entries = max_entries
        self._overrides = overrides if overrides is not None else OrderedDict()
        self._lock = lock or asyncio.Lock()

    async def get(self, slug: str) -> Optional[ThemeChoice]:
        key = (self.viewer_id, slug)

        async with self._lock:
            theme = self._overrides.get(key)
            if theme is not None:
                self._overrides.move_to_end(key)

            return theme

    async def set(self, slug: str, theme: ThemeChoice) -> None:
        key = (self.viewer_id, slug)

        async with self._lock:
            self._overrides[key] = ThemeChoice(theme)
            self._overrides.move_to_end(key)

            if self.max_entries is not None:
                while len(self._overrides) > self.max_entries:
                    self._overrides.popitem(last=False)

    async def delete(self, slug: str) -> None:
        async with self._lock:
            self._overrides.pop((self.viewer_id, slug), None)


class ThemeOverrideRegistry:
    def __init__(self, max_entries: Optional[int] = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive: {max_entries}")

        self.max_entries = max_entries
        self._overrides: OrderedDict[tuple[str, str], ThemeChoice] = OrderedDict()
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._overrides)

    def for_viewer(self, viewer_id: str) -> ThemeOverrideStore:
        return DictThemeOverrideStore(
            viewer_id,
            overrides=self._overrides,
            lock=self._lock,
            max_entries=self.max_entries,
        )


@lru_cache
def get_theme_override_registry() -> ThemeOverrideRegistry:
    return ThemeOverrideRegistry(max_entries=get_config().THEME_OVERRIDE_MAX_ENTRIES)


def get_theme_override_store(viewer_id: str) -> ThemeOverrideStore:
    return get_theme_override_registry().for_viewer(viewer_id)
