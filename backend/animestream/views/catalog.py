from __future__ import annotations

from collections.abc import Sequence

from ..domain.ports.anime import AnimeData, AnimePort
from ..errors import StoreError
from .notifications import Notifier


def filter_by_title(items: Sequence[AnimeData], query: str) -> list[AnimeData]:
    """Case-insensitive substring match on the title, preserving order."""
    needle = query.lower()
    return [item for item in items if needle in item.title.lower()]


class CatalogView:
    """Public catalog: every anime by rating, narrowed by a title search."""

    def __init__(self, anime_port: AnimePort, notifier: Notifier | None = None) -> None:
        self._anime_port = anime_port
        self.notifier = notifier or Notifier()
        self.items: list[AnimeData] = []
        self.search = ""
        self.loading = True

    async def load(self) -> None:
        try:
            self.items = await self._anime_port.list_by_rating()
        except StoreError:
            self.items = []
            self.notifier.error("Failed to load anime")
        finally:
            self.loading = False

    def set_search(self, query: str) -> None:
        self.search = query

    @property
    def visible(self) -> list[AnimeData]:
        return filter_by_title(self.items, self.search)

    @property
    def not_found(self) -> bool:
        return not self.loading and not self.visible
