"""In-memory port implementations for view and API tests."""
import itertools
import uuid
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any

from animestream.domain.ports.auth import AuthSession
from animestream.errors import AuthServiceError, StoreError

_BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
_clock = itertools.count(1)


def _next_timestamp() -> datetime:
    return _BASE_TIME + timedelta(minutes=next(_clock))


def make_anime(**overrides: Any) -> SimpleNamespace:
    values = {
        "id": uuid.uuid4(),
        "title": "Cowboy Bebop",
        "description": "Bounty hunters in space.",
        "image_url": "https://img.example/bebop.jpg",
        "video_url": "https://video.example/embed/bebop",
        "rating": 8.9,
        "genre": "Sci-Fi",
        "release_year": 1998,
        "episodes": 26,
        "created_at": _next_timestamp(),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def make_advertisement(**overrides: Any) -> SimpleNamespace:
    values = {
        "id": uuid.uuid4(),
        "title": "Summer sale",
        "video_url": "https://video.example/embed/ad",
        "link_url": "https://shop.example/sale",
        "is_active": True,
        "created_at": _next_timestamp(),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


class FakeTablePort:
    """Records every call; operations listed in ``failing`` raise StoreError."""

    factory = staticmethod(make_anime)

    def __init__(self, rows=None, failing=()) -> None:
        self.rows = list(rows or [])
        self.failing = set(failing)
        self.calls: list[str] = []

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise StoreError(details={"operation": operation})

    def _find(self, row_id: str):
        for row in self.rows:
            if str(row.id) == str(row_id):
                return row
        return None

    async def list_recent(self):
        self._record("list_recent")
        return sorted(self.rows, key=lambda row: row.created_at, reverse=True)

    async def create(self, values: Mapping[str, Any]):
        self._record("create")
        row = self.factory(**values)
        self.rows.append(row)
        return row

    async def update(self, row_id: str, values: Mapping[str, Any]):
        self._record("update")
        row = self._find(row_id)
        if row is None:
            return None
        for field, value in values.items():
            setattr(row, field, value)
        return row

    async def delete(self, row_id: str) -> bool:
        self._record("delete")
        row = self._find(row_id)
        if row is None:
            return False
        self.rows.remove(row)
        return True


class FakeAnimePort(FakeTablePort):
    async def list_by_rating(self):
        self._record("list_by_rating")
        return sorted(self.rows, key=lambda row: row.rating, reverse=True)

    async def get(self, anime_id: str):
        self._record("get")
        return self._find(anime_id)


class FakeAdvertisementPort(FakeTablePort):
    factory = staticmethod(make_advertisement)

    async def first_active(self):
        self._record("first_active")
        for row in self.rows:
            if row.is_active:
                return row
        return None


class FakeUserRolePort:
    def __init__(self, admins=(), fail: bool = False) -> None:
        self.admins = set(admins)
        self.fail = fail
        self.queries: list[tuple[str, str]] = []

    async def has_role(self, user_id: str, role: str) -> bool:
        self.queries.append((user_id, role))
        if self.fail:
            raise StoreError(details={"operation": "select user role"})
        return role == "admin" and user_id in self.admins


class FakeAuthPort:
    """Maps access tokens to user ids."""

    def __init__(self, tokens=None, fail: bool = False) -> None:
        self.tokens = dict(tokens or {})
        self.fail = fail
        self.signed_out: list[str] = []

    async def get_session(self, access_token):
        if self.fail:
            raise AuthServiceError()
        if not access_token or access_token not in self.tokens:
            return None
        user_id = self.tokens[access_token]
        return AuthSession(user_id=user_id, access_token=access_token, email=f"{user_id}@example.com")

    async def sign_out(self, access_token: str) -> None:
        self.signed_out.append(access_token)
