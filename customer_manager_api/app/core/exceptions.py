"""
Service-layer exceptions and their HTTP translation.

Services raise the exceptions defined here instead of returning
``None`` so that every endpoint reports business-rule failures the
same way.  ``register_exception_handlers`` maps them onto JSON
responses using the ``{"detail": ...}`` envelope that FastAPI's own
``HTTPException`` produces.
"""

import logging
import sqlite3

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "email address already exists"


class ServiceError(Exception):
    """Base class for predictable service-layer exceptions."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(ServiceError):
    """Raised when the requested customer does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class DuplicateResourceError(ServiceError):
    """Raised when an email address is already taken."""


class NoDataChangeError(ServiceError):
    """Raised when an update would not change any stored value."""


def _is_duplicate_email(exc: sqlite3.IntegrityError) -> bool:
    # SQLite reports "UNIQUE constraint failed: customer.email"
    return "customer.email" in str(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for service errors and storage constraint violations."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        logger.warning(
            "%s %s rejected: %s", request.method, request.url.path, exc.message
        )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(sqlite3.IntegrityError)
    async def integrity_error_handler(request: Request, exc: sqlite3.IntegrityError) -> JSONResponse:
        if _is_duplicate_email(exc):
            # Two concurrent registrations passed the email check; the
            # UNIQUE constraint rejected the second one.
            logger.warning(
                "%s %s hit unique email constraint", request.method, request.url.path
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": DUPLICATE_EMAIL_MESSAGE},
            )
        logger.error(
            "Integrity error on %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
