from __future__ import annotations

import uuid
from datetime import datetime
from typing import Protocol

from .table import TablePort


class AdvertisementData(Protocol):
    id: uuid.UUID
    title: str
    video_url: str
    link_url: str
    is_active: bool
    created_at: datetime


class AdvertisementPort(TablePort[AdvertisementData], Protocol):
    async def first_active(self) -> AdvertisementData | None:
        ...
