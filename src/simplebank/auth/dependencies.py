"""FastAPI auth dependencies — the authentication gate.

Learn: ``require_auth`` is installed on protected routers via
``dependencies=[Depends(require_auth)]``. It runs before every handler in
the router and either stores the verified Payload on ``request.state`` or
halts the request with 401.

Every token failure (expired, bad signature, wrong algorithm, garbage) is
answered with the same message so the response can't be used as an oracle.
The actual reason only goes to the log.
"""

from typing import Optional

import structlog
from fastapi import Depends, Header, HTTPException, Request

from simplebank.token import Payload, TokenError, TokenMaker

logger = structlog.get_logger()

AUTH_PAYLOAD_KEY = "auth_payload"
AUTH_TYPE_BEARER = "Bearer"
INVALID_TOKEN_MESSAGE = "invalid or expired token"


class AuthHeaderError(Exception):
    """The authorization header is missing or cannot be used."""


class MissingAuthPayloadError(Exception):
    """No verified payload is attached to the request."""


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=message,
        headers={"WWW-Authenticate": AUTH_TYPE_BEARER},
    )


def get_token_maker(request: Request) -> TokenMaker:
    """The maker chosen at app construction."""
    return request.app.state.token_maker


def parse_bearer_token(authorization: Optional[str]) -> str:
    """Extract the token from an ``authorization`` header value.

    Only the first two whitespace-separated fields are considered and the
    scheme must be exactly ``Bearer``.
    """
    if not authorization:
        raise AuthHeaderError("authorization header is not provided")

    fields = authorization.split()
    if len(fields) < 2:
        raise AuthHeaderError("invalid authorization header format")

    auth_type, token = fields[0], fields[1]
    if auth_type != AUTH_TYPE_BEARER:
        raise AuthHeaderError(f"unsupported authorization type {auth_type}")
    return token


async def require_auth(
    request: Request,
    authorization: Optional[str] = Header(None),
    maker: TokenMaker = Depends(get_token_maker),
) -> Payload:
    """Authenticate the request or reject it with 401."""
    try:
        token = parse_bearer_token(authorization)
    except AuthHeaderError as e:
        logger.info("auth.header_rejected", reason=str(e), path=request.url.path)
        raise _unauthorized(str(e))

    try:
        payload = maker.verify_token(token)
    except TokenError as e:
        logger.info(
            "auth.token_rejected",
            reason=e.reason,
            error=str(e),
            path=request.url.path,
        )
        raise _unauthorized(INVALID_TOKEN_MESSAGE)

    setattr(request.state, AUTH_PAYLOAD_KEY, payload)
    structlog.contextvars.bind_contextvars(username=payload.username)
    return payload


def current_payload(request: Request) -> Payload:
    """Typed accessor for the payload stored by ``require_auth``.

    Raises MissingAuthPayloadError when the gate did not run for this
    request, instead of handing back an untyped value.
    """
    payload = getattr(request.state, AUTH_PAYLOAD_KEY, None)
    if not isinstance(payload, Payload):
        raise MissingAuthPayloadError("request is not authenticated")
    return payload


def get_current_user(request: Request) -> Payload:
    """Handler dependency — the authenticated caller's payload (401 if absent)."""
    try:
        return current_payload(request)
    except MissingAuthPayloadError as e:
        raise _unauthorized(str(e))
