from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..domain.ports.user_role import UserRolePort
from ..models.user_role import UserRole
from .base import store_errors


async def has_role(session: AsyncSession, user_id: str, role: str) -> bool:
    stmt = (
        select(UserRole.id)
        .where(UserRole.user_id == user_id, UserRole.role == role)
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none() is not None


async def grant_role(session: AsyncSession, user_id: str, role: str) -> bool:
    """Insert the role row unless it exists. Returns True when a row was added."""
    if await has_role(session, user_id, role):
        return False
    session.add(UserRole(user_id=user_id, role=role))
    await session.commit()
    return True


async def revoke_role(session: AsyncSession, user_id: str, role: str) -> bool:
    result = await session.execute(
        delete(UserRole).where(UserRole.user_id == user_id, UserRole.role == role)
    )
    await session.commit()
    return result.rowcount > 0


class UserRoleRepository(UserRolePort):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def has_role(self, user_id: str, role: str) -> bool:
        async with store_errors(self._session, "select user role"):
            return await has_role(self._session, user_id, role)
