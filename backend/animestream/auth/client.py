from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..domain.ports.auth import AuthPort, AuthSession
from ..errors import AuthServiceError
from ..security.token_inspection import (
    ExpiredTokenError,
    InvalidTokenError,
    validate_access_token,
)

logger = logging.getLogger("animestream.auth")

_NO_SESSION_STATUSES = frozenset({401, 403})


class AuthServiceClient(AuthPort):
    """Client for a GoTrue-compatible auth service.

    Session lookup hits ``GET /user`` with the caller's bearer token. When a
    JWT secret is configured, the token is inspected locally instead and the
    service is only contacted for sign-out. Requests are never retried.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        jwt_secret: str | None = None,
        jwt_algorithm: str = "HS256",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._jwt_secret = jwt_secret
        self._jwt_algorithm = jwt_algorithm
        self._transport = transport
        self._headers: dict[str, str] = {}
        if api_key:
            self._headers["apikey"] = api_key

    async def get_session(self, access_token: str | None) -> AuthSession | None:
        if not access_token:
            return None

        if self._jwt_secret:
            return self._session_from_token(access_token)

        response = await self._request("GET", "/user", access_token)
        if response.status_code in _NO_SESSION_STATUSES:
            return None
        self._raise_for_status(response, "session lookup")

        payload = self._json(response)
        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise AuthServiceError(
                "Auth service returned a user without an id",
                details={"operation": "session lookup"},
            )
        email = payload.get("email")
        return AuthSession(
            user_id=user_id,
            access_token=access_token,
            email=email if isinstance(email, str) else None,
        )

    async def sign_out(self, access_token: str) -> None:
        response = await self._request("POST", "/logout", access_token)
        if response.status_code in _NO_SESSION_STATUSES:
            logger.debug("sign-out for an already expired session")
            return
        self._raise_for_status(response, "sign out")

    def _session_from_token(self, access_token: str) -> AuthSession | None:
        try:
            payload = validate_access_token(
                access_token, self._jwt_secret or "", self._jwt_algorithm
            )
        except ExpiredTokenError:
            logger.debug("access token expired")
            return None
        except InvalidTokenError:
            logger.debug("access token rejected")
            return None
        email = payload.get("email")
        return AuthSession(
            user_id=payload["sub"],
            access_token=access_token,
            email=email if isinstance(email, str) else None,
        )

    async def _request(self, method: str, path: str, access_token: str) -> httpx.Response:
        headers = {**self._headers, "Authorization": f"Bearer {access_token}"}
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                return await client.request(method, path, headers=headers)
        except httpx.RequestError as exc:
            logger.warning("auth service unreachable method=%s path=%s error=%s", method, path, exc)
            raise AuthServiceError(details={"operation": f"{method} {path}"}) from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response, operation: str) -> None:
        if response.is_success:
            return
        logger.warning(
            "auth service error operation=%s status=%s", operation, response.status_code
        )
        raise AuthServiceError(
            details={"operation": operation, "status": response.status_code}
        )

    @staticmethod
    def _json(response: httpx.Response) -> Mapping[str, Any]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise AuthServiceError("Auth service returned malformed JSON") from exc
        if not isinstance(payload, dict):
            raise AuthServiceError("Auth service returned an unexpected payload")
        return payload
