from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AuthSession:
    user_id: str
    access_token: str
    email: str | None = None


class AuthPort(Protocol):
    async def get_session(self, access_token: str | None) -> AuthSession | None:
        ...

    async def sign_out(self, access_token: str) -> None:
        ...
