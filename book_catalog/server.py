"""
Server start-up.

Runs the application under uvicorn using the configured listen address.
There are no subcommands: starting the program starts the server.
"""

import logging

import uvicorn

from book_catalog.core.config import settings
from book_catalog.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def run() -> None:
    """Start uvicorn serving ``book_catalog.main:app``."""
    configure_logging(level=settings.log_level)
    logger.info(
        "Starting %s at http://%s:%d",
        settings.project_name,
        settings.http_host,
        settings.http_port,
    )
    uvicorn.run(
        "book_catalog.main:app",
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
        log_config=None,
        reload=False,
    )
