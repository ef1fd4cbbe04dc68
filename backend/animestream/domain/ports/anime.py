from __future__ import annotations

import uuid
from datetime import datetime
from typing import Protocol

from .table import TablePort


class AnimeData(Protocol):
    id: uuid.UUID
    title: str
    description: str
    image_url: str
    video_url: str
    rating: float
    genre: str
    release_year: int
    episodes: int
    created_at: datetime


class AnimePort(TablePort[AnimeData], Protocol):
    async def list_by_rating(self) -> list[AnimeData]:
        ...

    async def get(self, anime_id: str) -> AnimeData | None:
        ...
