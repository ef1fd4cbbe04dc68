import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import StoreError

logger = logging.getLogger("animestream.store")


def parse_row_id(row_id: str | uuid.UUID) -> uuid.UUID | None:
    """Row identifiers travel as opaque strings; malformed ones match nothing."""
    if isinstance(row_id, uuid.UUID):
        return row_id
    try:
        return uuid.UUID(str(row_id))
    except ValueError:
        return None


@asynccontextmanager
async def store_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.warning("store operation failed operation=%s error=%s", operation, exc)
        await session.rollback()
        raise StoreError(details={"operation": operation}) from exc
