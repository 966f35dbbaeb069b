"""
Shared fixtures.

Every test gets its own in-memory SQLite database. StaticPool keeps a
single connection alive so the schema survives across requests.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from book_catalog.application.books.book_service import BookService
from book_catalog.core.config import Settings
from book_catalog.infrastructure.books.book_repository import SqlBookUnitOfWork
from book_catalog.infrastructure.books.schema import ensure_schema
from book_catalog.main import create_app


@pytest.fixture
def engine() -> Engine:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        log_level="WARNING",
        rate_limit_enabled=False,
    )


@pytest.fixture
def service(engine: Engine) -> BookService:
    return BookService(uow=SqlBookUnitOfWork(engine))


@pytest.fixture
def client(settings: Settings, engine: Engine) -> TestClient:
    app = create_app(settings, engine=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def book_payload() -> dict:
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": "9780441013593",
        "publicationDate": "1965-08-01",
    }
