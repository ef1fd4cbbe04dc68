from collections.abc import AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from .auth.client import AuthServiceClient
from .config import settings
from .crud.advertisement import AdvertisementRepository
from .crud.anime import AnimeRepository
from .crud.user_role import UserRoleRepository
from .database import get_session
from .domain.ports.advertisement import AdvertisementPort
from .domain.ports.anime import AnimePort
from .domain.ports.auth import AuthPort
from .domain.ports.user_role import UserRolePort
from .errors import AuthError, PermissionError
from .schemas.notification import notifications_payload
from .views.admin_shell import AdminShell, ShellState

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_session():
        yield session


def get_anime_port(db: AsyncSession = Depends(get_db)) -> AnimePort:
    return AnimeRepository(db)


def get_advertisement_port(db: AsyncSession = Depends(get_db)) -> AdvertisementPort:
    return AdvertisementRepository(db)


def get_user_role_port(db: AsyncSession = Depends(get_db)) -> UserRolePort:
    return UserRoleRepository(db)


def get_auth_port() -> AuthPort:
    return AuthServiceClient(
        base_url=settings.auth_url,
        api_key=settings.auth_api_key,
        timeout_seconds=settings.auth_timeout_seconds,
        jwt_secret=settings.auth_jwt_secret,
        jwt_algorithm=settings.auth_jwt_algorithm,
    )


def get_access_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return None
    return credentials.credentials


def get_admin_shell(
    access_token: str | None = Depends(get_access_token),
    auth: AuthPort = Depends(get_auth_port),
    roles: UserRolePort = Depends(get_user_role_port),
) -> AdminShell:
    return AdminShell(auth, roles, access_token)


async def require_admin(shell: AdminShell = Depends(get_admin_shell)) -> AdminShell:
    """Re-derive admin rights for this request; nothing is cached across requests."""
    state = await shell.check()
    if state is ShellState.AUTHORIZED:
        return shell

    details = {
        "redirect_to": shell.redirect_to,
        "notifications": [item.model_dump() for item in notifications_payload(shell.notifier)],
    }
    if shell.access_denied:
        raise PermissionError("Access denied", details=details)
    raise AuthError("Not authenticated", details=details)
