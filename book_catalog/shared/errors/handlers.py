"""
Centralized error handlers for FastAPI.

Maps domain and framework errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the envelope built by ``error_response``.
Unexpected errors are converted by ``UnexpectedErrorMiddleware`` so
they leave through the same middleware as every other response.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from book_catalog.domain.books.errors import (
    BookDomainError,
    BookNotFoundError,
    DuplicateIsbnError,
)
from book_catalog.shared.errors.envelope import error_response
from book_catalog.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

PARAMETER_LOCATIONS = ("path", "query", "header", "cookie")


def _field_name(error: dict[str, Any]) -> str:
    """Return the dotted field path of a body validation error."""
    loc = error.get("loc", ())
    if error.get("type") == "json_invalid" or len(loc) < 2:
        return "body"
    return ".".join(str(part) for part in loc[1:])


def validation_error_response(exc: RequestValidationError) -> JSONResponse:
    """Translate a request validation failure into a 400 envelope.

    Malformed parameters win over missing parameters, which win over
    body field errors.
    """
    errors = exc.errors()

    for error in errors:
        loc = error.get("loc", ())
        if loc and loc[0] in PARAMETER_LOCATIONS and error.get("type") != "missing":
            name = str(loc[-1])
            return error_response(
                HTTP_400,
                f"Invalid parameter: {name}",
                value=str(error.get("input")),
            )

    for error in errors:
        loc = error.get("loc", ())
        if loc and loc[0] in PARAMETER_LOCATIONS:
            return error_response(HTTP_400, f"Missing parameter: {loc[-1]}")

    fields: dict[str, str] = {}
    for error in errors:
        fields.setdefault(_field_name(error), error.get("msg", "invalid value"))
    return error_response(HTTP_400, "Validation failed", fields=fields)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BookNotFoundError)
    async def handle_book_not_found(
        _request: Request, exc: BookNotFoundError
    ) -> JSONResponse:
        """Handle lookups of unknown book ids."""
        logger.warning("Book not found: %s", exc.book_id)
        return error_response(HTTP_404, exc.message)

    @app.exception_handler(DuplicateIsbnError)
    async def handle_duplicate_isbn(
        _request: Request, exc: DuplicateIsbnError
    ) -> JSONResponse:
        """Handle writes that would break ISBN uniqueness."""
        logger.warning("Duplicate ISBN rejected: %s", exc.isbn)
        return error_response(HTTP_409, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed parameters, missing parameters and invalid bodies."""
        logger.info("Request validation failed: %d error(s)", len(exc.errors()))
        return validation_error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
        return error_response(
            exc.status_code,
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(BookDomainError)
    async def handle_book_domain(
        _request: Request, exc: BookDomainError
    ) -> JSONResponse:
        """Catch-all for domain errors that no specific handler maps."""
        logger.error("Unhandled domain error: %s", exc.message)
        return error_response(
            HTTP_500, "Unexpected error", detail=type(exc).__name__
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Last resort for errors raised by the middleware stack itself."""
        return unexpected_error_response(exc)


def unexpected_error_response(exc: Exception) -> JSONResponse:
    """Log ``exc`` with its traceback and build a 500 envelope naming its kind."""
    logger.exception("Unexpected error: %s", type(exc).__name__, exc_info=exc)
    return error_response(HTTP_500, "Unexpected error", detail=type(exc).__name__)


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    """Turns errors no handler mapped into a 500 envelope.

    Installed innermost, so the response still passes through the
    security-header and CORS middleware on its way out.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return unexpected_error_response(exc)
