from fastapi import APIRouter, Depends, Query

from ...dependencies import get_advertisement_port, require_admin
from ...domain.ports.advertisement import AdvertisementPort
from ...schemas.advertisement import AdvertisementFormInput, AdvertisementRead
from ...schemas.notification import notifications_payload
from ...schemas.pages import AdvertisementManagerState
from ...views.managers import AdvertisementManager
from .common import (
    raise_store_failure,
    raise_submit_failure,
    require_confirmation,
    require_listed,
)


router = APIRouter(
    prefix="/admin/advertisements",
    tags=["admin-advertisements"],
    dependencies=[Depends(require_admin)],
)


def _state(manager: AdvertisementManager) -> AdvertisementManagerState:
    return AdvertisementManagerState(
        items=[AdvertisementRead.model_validate(item) for item in manager.items],
        notifications=notifications_payload(manager.notifier),
    )


@router.get("", response_model=AdvertisementManagerState)
async def list_advertisements(
    advertisement_port: AdvertisementPort = Depends(get_advertisement_port),
) -> AdvertisementManagerState:
    manager = AdvertisementManager(advertisement_port)
    await manager.refresh()
    return _state(manager)


@router.post("", response_model=AdvertisementManagerState)
async def create_advertisement(
    form_input: AdvertisementFormInput,
    advertisement_port: AdvertisementPort = Depends(get_advertisement_port),
) -> AdvertisementManagerState:
    manager = AdvertisementManager(advertisement_port)
    manager.open_create()
    manager.update_form(form_input.model_dump(exclude_unset=True))
    if not await manager.submit():
        raise_submit_failure(manager)
    return _state(manager)


@router.put("/{advertisement_id}", response_model=AdvertisementManagerState)
async def update_advertisement(
    advertisement_id: str,
    form_input: AdvertisementFormInput,
    advertisement_port: AdvertisementPort = Depends(get_advertisement_port),
) -> AdvertisementManagerState:
    manager = AdvertisementManager(advertisement_port)
    row = await require_listed(manager, advertisement_id)
    manager.open_edit(row)
    manager.update_form(form_input.model_dump(exclude_unset=True))
    if not await manager.submit():
        raise_submit_failure(manager)
    return _state(manager)


@router.delete("/{advertisement_id}", response_model=AdvertisementManagerState)
async def delete_advertisement(
    advertisement_id: str,
    confirm: bool = Query(False, description="Explicit confirmation of the deletion"),
    advertisement_port: AdvertisementPort = Depends(get_advertisement_port),
) -> AdvertisementManagerState:
    manager = AdvertisementManager(advertisement_port)
    require_confirmation(manager, confirm)
    await require_listed(manager, advertisement_id)
    if not await manager.delete(advertisement_id, confirmed=True):
        raise_store_failure(manager)
    return _state(manager)


@router.post("/{advertisement_id}/toggle", response_model=AdvertisementManagerState)
async def toggle_advertisement(
    advertisement_id: str,
    advertisement_port: AdvertisementPort = Depends(get_advertisement_port),
) -> AdvertisementManagerState:
    """Flip `is_active` of one advertisement. No confirmation step."""
    manager = AdvertisementManager(advertisement_port)
    await require_listed(manager, advertisement_id)
    if not await manager.toggle_active(advertisement_id):
        raise_store_failure(manager)
    return _state(manager)
