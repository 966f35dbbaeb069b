"""
Logging configuration for the service.

One stdout handler on the root logger carries application, uvicorn and
SQLAlchemy records in the same format. Uvicorn is started with
``log_config=None`` so its loggers propagate here instead of installing
their own handlers.

Never logs sensitive data (request bodies, credentials).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Per-request and per-statement chatter is only shown when asked for.
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
}


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(level: str = "INFO") -> None:
    """Route every log record of the service to stdout.

    Safe to call more than once; the previous root handler is replaced.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).
    """
    numeric_level = resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(quiet_level, numeric_level))
