"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
The limit is checked from an application-wide dependency, once routing
has matched the request, and keyed by client address and request path.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from book_catalog.core.config import Settings
from book_catalog.shared.errors.envelope import error_response

logger = logging.getLogger(__name__)

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Build the application limiter, keyed by client address.

    Args:
        settings: Settings holding the default limit and the on/off switch.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
        key_style="url",
    )


def enforce_rate_limit(request: Request) -> None:
    """Count the request against the default limits of ``app.state.limiter``.

    Raises:
        RateLimitExceeded: When the client has used up its allowance.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the JSON error envelope.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 envelope naming the limit that was hit.
    """
    logger.warning("Rate limit exceeded for %s", get_remote_address(request))
    return error_response(HTTP_429, "Rate limit exceeded", detail=str(exc.detail))
