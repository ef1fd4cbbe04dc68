from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

RowT = TypeVar("RowT", covariant=True)


class TablePort(Protocol[RowT]):
    """Passthrough operations an entity manager needs from one remote table."""

    async def list_recent(self) -> list[RowT]:
        ...

    async def create(self, values: Mapping[str, Any]) -> RowT:
        ...

    async def update(self, row_id: str, values: Mapping[str, Any]) -> RowT | None:
        ...

    async def delete(self, row_id: str) -> bool:
        ...
