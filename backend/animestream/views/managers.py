from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from ..domain.ports.advertisement import AdvertisementData, AdvertisementPort
from ..domain.ports.anime import AnimeData, AnimePort
from ..domain.ports.table import TablePort
from ..errors import StoreError
from .forms import AdvertisementForm, AnimeForm, EntityForm, FormValidationError
from .notifications import Notifier

logger = logging.getLogger("animestream.views.managers")

RowT = TypeVar("RowT")


class EntityManager(Generic[RowT]):
    """Form-driven CRUD panel over one table.

    The visible list only changes through ``refresh``: every successful
    mutation is followed by a full refetch, never by a local patch.
    """

    form_class: ClassVar[type[EntityForm]]
    # (nominative, accusative) labels for notification texts
    labels: ClassVar[tuple[str, str]] = ("Entry", "entry")

    def __init__(self, port: TablePort[RowT], notifier: Notifier | None = None) -> None:
        self._port = port
        self.notifier = notifier or Notifier()
        self.items: list[RowT] = []
        self.form: EntityForm | None = None
        self.editing_id: str | None = None

    @property
    def is_form_open(self) -> bool:
        return self.form is not None

    @property
    def delete_prompt(self) -> str:
        return f"Are you sure you want to delete this {self.labels[1]}?"

    async def refresh(self) -> bool:
        try:
            self.items = await self._port.list_recent()
        except StoreError:
            self.notifier.error(f"Failed to load {self.labels[1]}")
            return False
        return True

    def open_create(self) -> EntityForm:
        self.form = self.form_class()
        self.editing_id = None
        return self.form

    def open_edit(self, row: RowT) -> EntityForm:
        self.form = self.form_class.from_row(row)
        self.editing_id = str(getattr(row, "id"))
        return self.form

    def update_form(self, values: Mapping[str, Any]) -> None:
        form = self.form or self.open_create()
        form.update(values)

    def cancel(self) -> None:
        self.form = None
        self.editing_id = None

    async def submit(self) -> bool:
        if self.form is None:
            return False

        try:
            payload = self.form.parse()
        except FormValidationError:
            self.notifier.error("Please fix the highlighted fields")
            return False

        label, noun = self.labels
        if self.editing_id is not None:
            saved = await self._mutate(
                self._port.update(self.editing_id, payload), f"Failed to update {noun}"
            )
            success_message = f"{label} updated"
        else:
            saved = await self._mutate(self._port.create(payload), f"Failed to add {noun}")
            success_message = f"{label} added"

        if saved is None:
            return False

        self.notifier.success(success_message)
        self.cancel()
        await self.refresh()
        return True

    async def delete(self, row_id: str, *, confirmed: bool) -> bool:
        if not confirmed:
            return False

        label, noun = self.labels
        deleted = await self._mutate(self._port.delete(row_id), f"Failed to delete {noun}")
        if not deleted:
            return False

        self.notifier.success(f"{label} deleted")
        await self.refresh()
        return True

    def find(self, row_id: str) -> RowT | None:
        for item in self.items:
            if str(getattr(item, "id")) == str(row_id):
                return item
        return None

    async def _mutate(self, operation, failure_message: str):
        try:
            result = await operation
        except StoreError:
            self.notifier.error(failure_message)
            return None
        if result is None or result is False:
            logger.info("mutation matched no row: %s", failure_message)
            self.notifier.error(failure_message)
            return None
        return result


class AnimeManager(EntityManager[AnimeData]):
    form_class = AnimeForm
    labels = ("Anime", "anime")

    def __init__(self, port: AnimePort, notifier: Notifier | None = None) -> None:
        super().__init__(port, notifier)


class AdvertisementManager(EntityManager[AdvertisementData]):
    form_class = AdvertisementForm
    labels = ("Advertisement", "advertisement")

    def __init__(self, port: AdvertisementPort, notifier: Notifier | None = None) -> None:
        super().__init__(port, notifier)

    async def toggle_active(self, row_id: str) -> bool:
        """Flip ``is_active`` starting from the value currently listed."""
        advertisement = self.find(row_id)
        if advertisement is None:
            self.notifier.error("Failed to update status")
            return False

        updated = await self._mutate(
            self._port.update(row_id, {"is_active": not advertisement.is_active}),
            "Failed to update status",
        )
        if updated is None:
            return False

        await self.refresh()
        return True
