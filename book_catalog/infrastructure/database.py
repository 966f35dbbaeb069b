"""
Database engine construction.

One Engine (and therefore one connection pool) is built at startup
and shared by every request.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from book_catalog.core.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings.

    Args:
        settings: Application settings holding the DSN and pool options.

    Returns:
        An Engine with pre-ping enabled so stale pooled connections
        are replaced transparently.
    """
    url = make_url(settings.get_database_url())
    options: dict = {"pool_pre_ping": True, "echo": settings.db_echo}
    if url.get_backend_name() != "sqlite":
        options["pool_size"] = settings.db_pool_size

    logger.info(
        "Creating database engine: backend=%s host=%s database=%s",
        url.get_backend_name(),
        url.host,
        url.database,
    )
    return create_engine(url, **options)
