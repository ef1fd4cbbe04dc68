from typing import Any, Dict

import jwt


class InvalidTokenError(Exception):
    """Raised when a token cannot be parsed or is malformed."""


class ExpiredTokenError(Exception):
    """Raised when a token has expired."""


def _parse_token_payload(token: str, secret: str, algorithm: str) -> Dict[str, Any]:
    try:
        # Auth-service tokens carry an audience we do not pin.
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"verify_aud": False},
        )
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredTokenError from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError from exc


def validate_access_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    payload = _parse_token_payload(token, secret, algorithm)

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise InvalidTokenError()

    return payload
