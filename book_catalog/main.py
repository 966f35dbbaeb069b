"""
Application entry point.

Creates the FastAPI application and wires together:
- Database engine, unit of work and BookService
- Routers
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, CORS, request timeout)
- Rate limiting, as an application-wide dependency
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from book_catalog.application.books.book_service import BookService
from book_catalog.core.config import Settings, settings as default_settings
from book_catalog.infrastructure.books.book_repository import SqlBookUnitOfWork
from book_catalog.infrastructure.books.schema import ensure_schema
from book_catalog.infrastructure.database import build_engine
from book_catalog.interfaces.books.router import router as books_router
from book_catalog.interfaces.health import router as health_router
from book_catalog.shared.errors.handlers import (
    UnexpectedErrorMiddleware,
    register_error_handlers,
)
from book_catalog.shared.logging import configure_logging
from book_catalog.shared.responses import UTF8JSONResponse
from book_catalog.shared.security.headers import SecurityHeadersMiddleware
from book_catalog.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
)
from book_catalog.shared.timeout import RequestTimeoutMiddleware

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root: every dependency is constructed here
    and handed down explicitly.

    Args:
        settings: Application settings. Defaults to the environment-loaded ones.
        engine: Database engine to use. When omitted one is built from
            settings and disposed on shutdown.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    owns_engine = engine is None
    if engine is None:
        engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the schema on startup and release the pool on shutdown."""
        if settings.create_schema:
            ensure_schema(engine)
        logger.info("%s %s started.", settings.project_name, settings.version)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        default_response_class=UTF8JSONResponse,
        dependencies=[Depends(enforce_rate_limit)],
        lifespan=lifespan,
    )

    app.state.book_service = BookService(uow=SqlBookUnitOfWork(engine))
    app.state.limiter = build_limiter(settings)

    # --- Middleware (last added runs first) ---
    app.add_middleware(UnexpectedErrorMiddleware)
    if settings.request_timeout_seconds:
        app.add_middleware(
            RequestTimeoutMiddleware,
            timeout_seconds=settings.request_timeout_seconds,
        )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Accept"],
        expose_headers=["Location"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(books_router)

    return app


app = create_app()
