"""
JSON response class used by every route and error handler.
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSON response that states its charset explicitly."""

    media_type = "application/json; charset=utf-8"
