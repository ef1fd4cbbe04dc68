"""Response bodies mirroring the state of each screen."""
from pydantic import BaseModel, Field

from .advertisement import AdvertisementEmbedRead, AdvertisementRead
from .anime import AnimeRead
from .notification import NotificationRead


class CatalogPage(BaseModel):
    items: list[AnimeRead]
    search: str
    not_found: bool
    notifications: list[NotificationRead] = Field(default_factory=list)


class DetailPage(BaseModel):
    anime: AnimeRead
    advertisement: AdvertisementEmbedRead | None = None


class AdminSessionRead(BaseModel):
    state: str
    redirect_to: str | None = None
    user_id: str | None = None
    email: str | None = None
    tabs: list[str] = Field(default_factory=list)
    notifications: list[NotificationRead] = Field(default_factory=list)


class AnimeManagerState(BaseModel):
    items: list[AnimeRead]
    notifications: list[NotificationRead] = Field(default_factory=list)


class AdvertisementManagerState(BaseModel):
    items: list[AdvertisementRead]
    notifications: list[NotificationRead] = Field(default_factory=list)
