# app/auth/dependencies.py
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.utils.jwt_handler import TokenError, TokenIssuer, get_token_issuer

import logging
logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

F = TypeVar("F", bound=Callable)


def public(endpoint: F) -> F:
    """Mark a route handler as reachable without an access token."""
    endpoint.is_public = True
    return endpoint


def is_public_endpoint(request: Request) -> bool:
    route = request.scope.get("route")
    endpoint = getattr(route, "endpoint", None) or request.scope.get("endpoint")
    return bool(getattr(endpoint, "is_public", False))


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> str:
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Missing bearer token")
    return credentials.credentials


def access_token_guard(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> None:
    """
    App-wide guard: every route needs a valid access token unless flagged with @public.

    On success the admin id is stored on request.state for the handlers.
    """
    if is_public_endpoint(request):
        return

    token = _bearer_token(credentials)
    try:
        payload = issuer.verify_access_token(token)
    except TokenError as e:
        logger.info(f"Rejected access token on {request.method} {request.url.path}: {e}")
        raise _unauthorized("Invalid or expired access token")

    request.state.admin_id = payload["sub"]


def get_current_admin_id(request: Request) -> str:
    admin_id = getattr(request.state, "admin_id", None)
    if not admin_id:
        raise _unauthorized("Not authenticated")
    return admin_id


@dataclass
class RefreshCredentials:
    admin_id: str
    refresh_token: str


def refresh_token_guard(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> RefreshCredentials:
    """Verify the bearer token as a refresh token and hand back its subject and raw value."""
    token = _bearer_token(credentials)
    try:
        payload = issuer.verify_refresh_token(token)
    except TokenError as e:
        logger.info(f"Rejected refresh token: {e}")
        raise _unauthorized("Invalid or expired refresh token")

    return RefreshCredentials(admin_id=payload["sub"], refresh_token=token)
