from fastapi import APIRouter

from .admin import advertisements as admin_advertisements
from .admin import anime as admin_anime
from .admin import session as admin_session
from .public import catalog as public_catalog

router = APIRouter(prefix="/api")

_public_routers = [
    public_catalog.router,
]

_admin_routers = [
    admin_session.router,
    admin_anime.router,
    admin_advertisements.router,
]

for _router in [*_public_routers, *_admin_routers]:
    router.include_router(_router)
