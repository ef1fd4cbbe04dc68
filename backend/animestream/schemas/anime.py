from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AnimeRead(BaseModel):
    """Every user-facing anime field, as shown on the detail page."""
    id: UUID
    title: str
    description: str
    image_url: str
    video_url: str  # embed URL
    rating: float
    genre: str
    release_year: int
    episodes: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AnimeFormInput(BaseModel):
    """Raw admin form input. Values are validated by the form, not here."""
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    rating: str | float | int | None = None
    genre: str | None = None
    release_year: str | int | None = None
    episodes: str | int | None = None
