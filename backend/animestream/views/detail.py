from __future__ import annotations

from ..domain.ports.advertisement import AdvertisementPort
from ..domain.ports.anime import AnimeData, AnimePort
from ..errors import StoreError
from .advertisement import AdvertisementWidget
from .navigation import CATALOG_ROUTE
from .notifications import Notifier


class DetailView:
    def __init__(
        self,
        anime_port: AnimePort,
        advertisement_port: AdvertisementPort,
        notifier: Notifier | None = None,
    ) -> None:
        self._anime_port = anime_port
        self.notifier = notifier or Notifier()
        self.advertisement = AdvertisementWidget(advertisement_port)
        self.anime: AnimeData | None = None
        self.redirect_to: str | None = None
        self.loading = True

    async def load(self, anime_id: str) -> None:
        """Fetch one anime; a missing row is handled like a failed fetch."""
        try:
            anime = await self._anime_port.get(anime_id)
        except StoreError:
            anime = None
        finally:
            self.loading = False

        if anime is None:
            self.notifier.error("Failed to load anime")
            self.redirect_to = CATALOG_ROUTE
            return

        self.anime = anime
        await self.advertisement.load()
