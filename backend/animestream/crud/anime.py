from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..domain.ports.anime import AnimePort
from ..models.anime import Anime
from .base import parse_row_id, store_errors

EDITABLE_FIELDS = (
    "title",
    "description",
    "image_url",
    "video_url",
    "rating",
    "genre",
    "release_year",
    "episodes",
)


def _editable(values: Mapping[str, Any]) -> dict[str, Any]:
    return {field: values[field] for field in EDITABLE_FIELDS if field in values}


async def list_anime_by_rating(session: AsyncSession) -> list[Anime]:
    result = await session.execute(select(Anime).order_by(Anime.rating.desc()))
    return list(result.scalars().all())


async def list_anime_by_created(session: AsyncSession) -> list[Anime]:
    result = await session.execute(select(Anime).order_by(Anime.created_at.desc()))
    return list(result.scalars().all())


async def get_anime(session: AsyncSession, anime_id: str) -> Anime | None:
    parsed_id = parse_row_id(anime_id)
    if parsed_id is None:
        return None
    return await session.get(Anime, parsed_id)


async def create_anime(session: AsyncSession, values: Mapping[str, Any]) -> Anime:
    anime = Anime(**_editable(values))
    session.add(anime)
    await session.flush()
    await session.refresh(anime)
    await session.commit()
    return anime


async def update_anime(
    session: AsyncSession, anime_id: str, values: Mapping[str, Any]
) -> Anime | None:
    anime = await get_anime(session, anime_id)
    if anime is None:
        return None
    for field, value in _editable(values).items():
        setattr(anime, field, value)
    await session.flush()
    await session.refresh(anime)
    await session.commit()
    return anime


async def delete_anime(session: AsyncSession, anime_id: str) -> bool:
    parsed_id = parse_row_id(anime_id)
    if parsed_id is None:
        return False
    result = await session.execute(delete(Anime).where(Anime.id == parsed_id))
    await session.commit()
    return result.rowcount > 0


class AnimeRepository(AnimePort):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_by_rating(self) -> list[Anime]:
        async with store_errors(self._session, "select anime order by rating"):
            return await list_anime_by_rating(self._session)

    async def list_recent(self) -> list[Anime]:
        async with store_errors(self._session, "select anime order by created_at"):
            return await list_anime_by_created(self._session)

    async def get(self, anime_id: str) -> Anime | None:
        async with store_errors(self._session, "select anime by id"):
            return await get_anime(self._session, anime_id)

    async def create(self, values: Mapping[str, Any]) -> Anime:
        async with store_errors(self._session, "insert anime"):
            return await create_anime(self._session, values)

    async def update(self, row_id: str, values: Mapping[str, Any]) -> Anime | None:
        async with store_errors(self._session, "update anime"):
            return await update_anime(self._session, row_id, values)

    async def delete(self, row_id: str) -> bool:
        async with store_errors(self._session, "delete anime"):
            return await delete_anime(self._session, row_id)
