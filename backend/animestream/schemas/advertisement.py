from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AdvertisementRead(BaseModel):
    id: UUID
    title: str
    video_url: str
    link_url: str
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AdvertisementEmbedRead(BaseModel):
    """Rendered ad slot. ``target`` is where a click on the video opens ``link_url``."""
    title: str
    video_url: str
    link_url: str
    target: str

    model_config = ConfigDict(from_attributes=True)


class AdvertisementFormInput(BaseModel):
    title: str | None = None
    video_url: str | None = None
    link_url: str | None = None
    is_active: bool | str | None = None
