"""
Tests for the logging setup shared by the app and the server entry point.
"""

import logging

import pytest

from book_catalog.shared.logging import configure_logging, resolve_level


class TestResolveLevel:
    """Tests for level name parsing."""

    @pytest.mark.parametrize(
        "name, expected",
        [("INFO", logging.INFO), ("debug", logging.DEBUG), (" Warning ", logging.WARNING)],
    )
    def test_known_levels(self, name, expected) -> None:
        assert resolve_level(name) == expected

    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level: loud"):
            resolve_level("loud")


class TestConfigureLogging:
    """Tests for the root and third-party logger wiring."""

    def test_uvicorn_loggers_propagate_to_root(self) -> None:
        stray = logging.StreamHandler()
        logging.getLogger("uvicorn.error").addHandler(stray)

        configure_logging("INFO")

        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            server_logger = logging.getLogger(name)
            assert server_logger.handlers == []
            assert server_logger.propagate is True

    def test_root_level_follows_setting(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_access_and_sql_logs_quiet_below_warning(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_quiet_loggers_never_louder_than_root(self) -> None:
        configure_logging("ERROR")
        assert logging.getLogger("uvicorn.access").level == logging.ERROR
        assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
