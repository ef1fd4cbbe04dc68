from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..domain.ports.advertisement import AdvertisementPort
from ..models.advertisement import Advertisement
from .base import parse_row_id, store_errors

EDITABLE_FIELDS = ("title", "video_url", "link_url", "is_active")


def _editable(values: Mapping[str, Any]) -> dict[str, Any]:
    return {field: values[field] for field in EDITABLE_FIELDS if field in values}


async def get_first_active_advertisement(session: AsyncSession) -> Advertisement | None:
    # Unordered on purpose: with several active rows the store picks one.
    stmt = select(Advertisement).where(Advertisement.is_active).limit(1)
    result = await session.execute(stmt)
    return result.scalars().first()


async def list_advertisements(session: AsyncSession) -> list[Advertisement]:
    stmt = select(Advertisement).order_by(Advertisement.created_at.desc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_advertisement(session: AsyncSession, ad_id: str) -> Advertisement | None:
    parsed_id = parse_row_id(ad_id)
    if parsed_id is None:
        return None
    return await session.get(Advertisement, parsed_id)


async def create_advertisement(
    session: AsyncSession, values: Mapping[str, Any]
) -> Advertisement:
    advertisement = Advertisement(**_editable(values))
    session.add(advertisement)
    await session.flush()
    await session.refresh(advertisement)
    await session.commit()
    return advertisement


async def update_advertisement(
    session: AsyncSession, ad_id: str, values: Mapping[str, Any]
) -> Advertisement | None:
    advertisement = await get_advertisement(session, ad_id)
    if advertisement is None:
        return None
    for field, value in _editable(values).items():
        setattr(advertisement, field, value)
    await session.flush()
    await session.refresh(advertisement)
    await session.commit()
    return advertisement


async def delete_advertisement(session: AsyncSession, ad_id: str) -> bool:
    parsed_id = parse_row_id(ad_id)
    if parsed_id is None:
        return False
    result = await session.execute(
        delete(Advertisement).where(Advertisement.id == parsed_id)
    )
    await session.commit()
    return result.rowcount > 0


class AdvertisementRepository(AdvertisementPort):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def first_active(self) -> Advertisement | None:
        async with store_errors(self._session, "select active advertisement"):
            return await get_first_active_advertisement(self._session)

    async def list_recent(self) -> list[Advertisement]:
        async with store_errors(self._session, "select advertisements"):
            return await list_advertisements(self._session)

    async def create(self, values: Mapping[str, Any]) -> Advertisement:
        async with store_errors(self._session, "insert advertisement"):
            return await create_advertisement(self._session, values)

    async def update(self, row_id: str, values: Mapping[str, Any]) -> Advertisement | None:
        async with store_errors(self._session, "update advertisement"):
            return await update_advertisement(self._session, row_id, values)

    async def delete(self, row_id: str) -> bool:
        async with store_errors(self._session, "delete advertisement"):
            return await delete_advertisement(self._session, row_id)
