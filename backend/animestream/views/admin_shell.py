from __future__ import annotations

import logging
from enum import Enum

from ..domain.ports.auth import AuthPort, AuthSession
from ..domain.ports.user_role import UserRolePort
from ..errors import AuthServiceError, StoreError
from ..models.user_role import ADMIN_ROLE
from .navigation import AUTH_ROUTE, CATALOG_ROUTE
from .notifications import Notifier

logger = logging.getLogger("animestream.views.admin")

ADMIN_TABS = ("anime", "ads")


class ShellState(str, Enum):
    CHECKING = "checking"
    AUTHORIZED = "authorized"
    REDIRECTING = "redirecting"


class AdminShell:
    """Authorization gate in front of the management panels.

    ``check`` derives the state from the auth service and the role table every
    time it runs; nothing is cached between entries, so a revoked admin keeps
    access only until the next entry.
    """

    def __init__(
        self,
        auth: AuthPort,
        roles: UserRolePort,
        access_token: str | None,
        notifier: Notifier | None = None,
    ) -> None:
        self._auth = auth
        self._roles = roles
        self._access_token = access_token
        self.notifier = notifier or Notifier()
        self.state = ShellState.CHECKING
        self.session: AuthSession | None = None
        self.redirect_to: str | None = None
        self.access_denied = False

    @property
    def tabs(self) -> tuple[str, ...]:
        return ADMIN_TABS if self.state is ShellState.AUTHORIZED else ()

    async def check(self) -> ShellState:
        if self.state is not ShellState.CHECKING:
            return self.state

        try:
            session = await self._auth.get_session(self._access_token)
            if session is None:
                return self._redirect(AUTH_ROUTE)

            is_admin = await self._roles.has_role(session.user_id, ADMIN_ROLE)
        except (AuthServiceError, StoreError):
            logger.warning("admin check failed", exc_info=True)
            return self._redirect(AUTH_ROUTE)

        if not is_admin:
            logger.info("admin access denied user_id=%s", session.user_id)
            self.access_denied = True
            self.notifier.error("You do not have administrator rights", title="Access denied")
            await self._sign_out(session.access_token)
            return self._redirect(AUTH_ROUTE)

        self.session = session
        self.state = ShellState.AUTHORIZED
        return self.state

    async def logout(self) -> None:
        if self._access_token:
            await self._sign_out(self._access_token)
        self.session = None
        self.redirect_to = CATALOG_ROUTE
        self.state = ShellState.REDIRECTING
        self.notifier.success("You have signed out")

    async def _sign_out(self, access_token: str) -> None:
        try:
            await self._auth.sign_out(access_token)
        except AuthServiceError:
            logger.warning("sign-out failed", exc_info=True)

    def _redirect(self, route: str) -> ShellState:
        self.session = None
        self.redirect_to = route
        self.state = ShellState.REDIRECTING
        return self.state
