"""
Public catalog endpoints.

These back the catalog page (`/`), the detail page (`/anime/:id`) and the
advertisement slot shown on it. They never require a session.
"""
from fastapi import APIRouter, Depends, Query

from ...dependencies import get_advertisement_port, get_anime_port
from ...domain.ports.advertisement import AdvertisementPort
from ...domain.ports.anime import AnimePort
from ...errors import NotFoundError
from ...schemas.advertisement import AdvertisementEmbedRead
from ...schemas.anime import AnimeRead
from ...schemas.notification import notifications_payload
from ...schemas.pages import CatalogPage, DetailPage
from ...views.advertisement import AdvertisementWidget
from ...views.catalog import CatalogView
from ...views.detail import DetailView


router = APIRouter(tags=["catalog"])


@router.get("/anime", response_model=CatalogPage)
async def list_catalog(
    q: str = Query("", description="Case-insensitive title filter"),
    anime_port: AnimePort = Depends(get_anime_port),
) -> CatalogPage:
    """
    Catalog page state.

    Every anime ordered by rating (highest first), narrowed to titles that
    contain `q`. A store failure yields an empty list plus a notification.
    """
    view = CatalogView(anime_port)
    await view.load()
    view.set_search(q)
    return CatalogPage(
        items=[AnimeRead.model_validate(item) for item in view.visible],
        search=view.search,
        not_found=view.not_found,
        notifications=notifications_payload(view.notifier),
    )


@router.get("/anime/{anime_id}", response_model=DetailPage)
async def get_anime_detail(
    anime_id: str,
    anime_port: AnimePort = Depends(get_anime_port),
    advertisement_port: AdvertisementPort = Depends(get_advertisement_port),
) -> DetailPage:
    """Detail page state. Missing rows answer 404 with a redirect to the catalog."""
    view = DetailView(anime_port, advertisement_port)
    await view.load(anime_id)
    if view.anime is None:
        raise NotFoundError(
            "Failed to load anime",
            details={"redirect_to": view.redirect_to},
        )

    embed = view.advertisement.render()
    return DetailPage(
        anime=AnimeRead.model_validate(view.anime),
        advertisement=AdvertisementEmbedRead.model_validate(embed) if embed else None,
    )


@router.get("/advertisements/active", response_model=AdvertisementEmbedRead | None)
async def get_active_advertisement(
    advertisement_port: AdvertisementPort = Depends(get_advertisement_port),
) -> AdvertisementEmbedRead | None:
    """The advertisement slot on its own. `null` when nothing is active."""
    widget = AdvertisementWidget(advertisement_port)
    await widget.load()
    embed = widget.render()
    return AdvertisementEmbedRead.model_validate(embed) if embed else None
