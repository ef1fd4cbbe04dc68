from __future__ import annotations

from typing import Protocol


class UserRolePort(Protocol):
    async def has_role(self, user_id: str, role: str) -> bool:
        ...
