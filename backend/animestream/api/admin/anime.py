"""
Admin API endpoints for the anime panel.

Every endpoint re-runs the admin gate. Mutations answer with the list as
refetched after the write, never with a locally patched copy.
"""
from fastapi import APIRouter, Depends, Query

from ...dependencies import get_anime_port, require_admin
from ...domain.ports.anime import AnimePort
from ...schemas.anime import AnimeFormInput, AnimeRead
from ...schemas.notification import notifications_payload
from ...schemas.pages import AnimeManagerState
from ...views.managers import AnimeManager
from .common import (
    raise_store_failure,
    raise_submit_failure,
    require_confirmation,
    require_listed,
)


router = APIRouter(
    prefix="/admin/anime",
    tags=["admin-anime"],
    dependencies=[Depends(require_admin)],
)


def _state(manager: AnimeManager) -> AnimeManagerState:
    return AnimeManagerState(
        items=[AnimeRead.model_validate(item) for item in manager.items],
        notifications=notifications_payload(manager.notifier),
    )


@router.get("", response_model=AnimeManagerState)
async def list_anime(anime_port: AnimePort = Depends(get_anime_port)) -> AnimeManagerState:
    """All anime, most recently created first."""
    manager = AnimeManager(anime_port)
    await manager.refresh()
    return _state(manager)


@router.post("", response_model=AnimeManagerState)
async def create_anime(
    form_input: AnimeFormInput,
    anime_port: AnimePort = Depends(get_anime_port),
) -> AnimeManagerState:
    """
    Submit the create form. Omitted fields keep the form defaults.

    Invalid input answers 400 with per-field messages and issues no write.
    """
    manager = AnimeManager(anime_port)
    manager.open_create()
    manager.update_form(form_input.model_dump(exclude_unset=True))
    if not await manager.submit():
        raise_submit_failure(manager)
    return _state(manager)


@router.put("/{anime_id}", response_model=AnimeManagerState)
async def update_anime(
    anime_id: str,
    form_input: AnimeFormInput,
    anime_port: AnimePort = Depends(get_anime_port),
) -> AnimeManagerState:
    """Submit the edit form, pre-filled from the stored row."""
    manager = AnimeManager(anime_port)
    row = await require_listed(manager, anime_id)
    manager.open_edit(row)
    manager.update_form(form_input.model_dump(exclude_unset=True))
    if not await manager.submit():
        raise_submit_failure(manager)
    return _state(manager)


@router.delete("/{anime_id}", response_model=AnimeManagerState)
async def delete_anime(
    anime_id: str,
    confirm: bool = Query(False, description="Explicit confirmation of the deletion"),
    anime_port: AnimePort = Depends(get_anime_port),
) -> AnimeManagerState:
    """Delete one anime. Without `confirm=true` nothing is deleted (428)."""
    manager = AnimeManager(anime_port)
    require_confirmation(manager, confirm)
    await require_listed(manager, anime_id)
    if not await manager.delete(anime_id, confirmed=True):
        raise_store_failure(manager)
    return _state(manager)
