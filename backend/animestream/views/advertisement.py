from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.ports.advertisement import AdvertisementData, AdvertisementPort
from ..errors import StoreError

logger = logging.getLogger("animestream.views.advertisement")

NEW_BROWSING_CONTEXT = "_blank"


@dataclass(frozen=True)
class AdvertisementEmbed:
    title: str
    video_url: str
    link_url: str
    target: str = NEW_BROWSING_CONTEXT


@dataclass(frozen=True)
class ClickThrough:
    url: str
    target: str = NEW_BROWSING_CONTEXT


class AdvertisementWidget:
    """Cosmetic ad slot. It never reports errors to the user."""

    def __init__(self, advertisement_port: AdvertisementPort) -> None:
        self._advertisement_port = advertisement_port
        self.advertisement: AdvertisementData | None = None

    async def load(self) -> None:
        try:
            self.advertisement = await self._advertisement_port.first_active()
        except StoreError:
            logger.exception("failed to load active advertisement")
            self.advertisement = None

    def render(self) -> AdvertisementEmbed | None:
        if self.advertisement is None:
            return None
        return AdvertisementEmbed(
            title=self.advertisement.title,
            video_url=self.advertisement.video_url,
            link_url=self.advertisement.link_url,
        )

    def click(self) -> ClickThrough | None:
        if self.advertisement is None:
            return None
        return ClickThrough(url=self.advertisement.link_url)
