"""
JSON error envelope shared by every error response.

    {"timestamp": ..., "status": 404, "error": "Not Found", "message": ...}

plus the optional ``value``, ``fields`` and ``detail`` members.
"""

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Mapping, Optional

from book_catalog.shared.responses import UTF8JSONResponse


def utc_timestamp() -> str:
    """Return the current instant as RFC 3339 UTC with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown"


def error_response(
    status_code: int,
    message: str,
    *,
    value: Optional[str] = None,
    fields: Optional[Mapping[str, str]] = None,
    detail: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> UTF8JSONResponse:
    """Build an error envelope response.

    Args:
        status_code: HTTP status of the response.
        message: Human-readable message.
        value: Offending parameter value, if any.
        fields: Per-field validation messages, if any.
        detail: Extra machine-oriented detail, e.g. an error kind tag.
        headers: Extra response headers.

    Returns:
        A UTF8JSONResponse carrying the envelope.
    """
    body: dict[str, Any] = {
        "timestamp": utc_timestamp(),
        "status": status_code,
        "error": reason_phrase(status_code),
        "message": message,
    }
    if value is not None:
        body["value"] = value
    if fields:
        body["fields"] = dict(fields)
    if detail is not None:
        body["detail"] = detail
    return UTF8JSONResponse(status_code=status_code, content=body, headers=headers)
