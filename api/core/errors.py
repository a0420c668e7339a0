"""
Failure taxonomy for the request path and its mapping to HTTP responses.

Every failure a handler can surface is one of the APIError subclasses below.
Each class owns a fixed status code and a fixed plain-text body, so nothing
from the underlying error (SQL text, driver messages) reaches the client.
"""

from __future__ import annotations

import logging
import sqlite3

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

logger = logging.getLogger(__name__)

_PG_UNIQUE_VIOLATION = "23505"


class APIError(Exception):
    """Base class for failures rendered by the error handlers."""

    status_code = 500
    message = "internal error"

    def __str__(self) -> str:
        return self.message


class ValidationFailure(APIError):
    status_code = 400
    message = "invalid input"


class PersistenceUniqueViolation(APIError):
    status_code = 400
    message = "already exists"


class PersistenceOtherError(APIError):
    status_code = 500
    message = "query error"


class Unauthenticated(APIError):
    status_code = 403
    message = "not authorised"


class ParameterParseFailure(APIError):
    status_code = 400
    message = "parsing error"


def is_unique_violation(exc: SQLAlchemyError) -> bool:
    """True when the driver reports a unique-key violation (checked by error code)."""
    if not isinstance(exc, DBAPIError):
        return False
    orig = exc.orig
    if isinstance(orig, sqlite3.Error):
        return getattr(orig, "sqlite_errorcode", None) == sqlite3.SQLITE_CONSTRAINT_UNIQUE
    # psycopg2 exposes pgcode, psycopg 3 and asyncpg expose sqlstate
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    return code == _PG_UNIQUE_VIOLATION


def persistence_error(exc: SQLAlchemyError) -> APIError:
    """Convert a SQLAlchemy failure into the matching taxonomy entry."""
    if is_unique_violation(exc):
        return PersistenceUniqueViolation()
    return PersistenceOtherError()


def classify(exc: Exception) -> tuple[int, str]:
    """Return the (status, body) pair for any failure raised on the request path."""
    if isinstance(exc, RequestValidationError):
        exc = ValidationFailure()
    elif isinstance(exc, SQLAlchemyError):
        exc = persistence_error(exc)
    if isinstance(exc, APIError):
        return exc.status_code, exc.message
    return APIError.status_code, APIError.message


async def _api_error_handler(request: Request, exc: APIError) -> PlainTextResponse:
    status, body = classify(exc)
    if status >= 500:
        cause = exc.__cause__ or exc
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc_info=(type(cause), cause, cause.__traceback__),
        )
    return PlainTextResponse(body, status_code=status)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.info("%s %s rejected: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    status, body = classify(exc)
    return PlainTextResponse(body, status_code=status)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
