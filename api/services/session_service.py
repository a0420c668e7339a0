"""Session helpers (codec construction, cookies, request authentication)."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Request, Response

from api.core.config import Settings, get_settings
from api.core.errors import Unauthenticated
from api.core.security import SessionCodec, VerificationError, generate_secret

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "user_id"


@dataclass(frozen=True)
class Principal:
    """Identity derived from a verified session cookie, valid for one request."""

    user_id: int


def build_session_codec(settings: Settings) -> SessionCodec:
    """Create the process-wide codec from configuration."""
    secret = settings.session_secret
    if not secret:
        if settings.app_env == "prod":
            raise RuntimeError("SESSION_SECRET must be configured in production.")
        logger.warning("SESSION_SECRET not set; using a random key, sessions end on restart")
        secret = generate_secret()
    return SessionCodec(secret, ttl_seconds=settings.session_ttl_seconds)


def _session_codec(request: Request) -> SessionCodec:
    codec = getattr(getattr(request.app, "state", None), "session_codec", None)
    if codec is None:
        raise RuntimeError("SessionCodec not configured")
    return codec


def current_principal(request: Request) -> Principal:
    """FastAPI dependency gating protected routes behind a valid session cookie."""
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        logger.debug("no session cookie on %s %s", request.method, request.url.path)
        raise Unauthenticated()
    try:
        user_id = _session_codec(request).decode(token)
    except VerificationError as exc:
        logger.debug("session rejected on %s %s: %s", request.method, request.url.path, exc)
        raise Unauthenticated() from None
    return Principal(user_id=user_id)


def issue_session(request: Request, user_id: int) -> str:
    return _session_codec(request).encode(user_id)


def set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    secure_cookie = settings.app_env == "prod"
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=secure_cookie,
        samesite="strict",
        max_age=settings.session_ttl_seconds or None,
        domain=settings.cookie_domain,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(SESSION_COOKIE_NAME, path="/", domain=settings.cookie_domain)
