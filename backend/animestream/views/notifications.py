from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("animestream.views")


class Variant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: Variant = Variant.DEFAULT


class Notifier:
    """Dismissible notifications a view has posted, oldest first."""

    def __init__(self) -> None:
        self._items: list[Notification] = []

    @property
    def items(self) -> list[Notification]:
        return list(self._items)

    def success(self, description: str, title: str = "Success") -> Notification:
        return self._post(Notification(title, description))

    def error(self, description: str, title: str = "Error") -> Notification:
        return self._post(Notification(title, description, Variant.DESTRUCTIVE))

    def dismiss(self, index: int) -> None:
        if 0 <= index < len(self._items):
            del self._items[index]

    def _post(self, notification: Notification) -> Notification:
        logger.debug(
            "notification variant=%s title=%s description=%s",
            notification.variant.value,
            notification.title,
            notification.description,
        )
        self._items.append(notification)
        return notification
