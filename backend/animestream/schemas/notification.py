from typing import Literal

from pydantic import BaseModel

from ..views.notifications import Notifier


class NotificationRead(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"]


def notifications_payload(notifier: Notifier) -> list[NotificationRead]:
    return [
        NotificationRead(
            title=item.title,
            description=item.description,
            variant=item.variant.value,
        )
        for item in notifier.items
    ]
