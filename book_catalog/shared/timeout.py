"""
Per-request timeout middleware.

Bounds the time a client waits for a response. Work already handed to
the thread pool is not interrupted; a transaction still open when its
connection context exits with an error is rolled back.
"""

import asyncio
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from book_catalog.shared.errors.envelope import error_response

logger = logging.getLogger(__name__)

HTTP_504 = 504


class RequestTimeoutMiddleware(BaseHTTPMiddleware):
    """Answers 504 when a request takes longer than ``timeout_seconds``."""

    def __init__(self, app: ASGIApp, timeout_seconds: float) -> None:
        super().__init__(app)
        self._timeout_seconds = timeout_seconds

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await asyncio.wait_for(
                call_next(request), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %.2fs: %s %s",
                self._timeout_seconds,
                request.method,
                request.url.path,
            )
            return error_response(HTTP_504, "Request timed out")
