"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes interactive docs).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        http_host: Address the HTTP server binds to.
        http_port: Port the HTTP server listens on.
        request_timeout_seconds: Per-request timeout. Disabled when unset.
        cors_allowed_origins: Browser origins allowed to call the API.
        rate_limit_enabled: Toggle for slowapi rate limiting.
        rate_limit_default: Default per-client rate limit.
        database_url: Full SQLAlchemy URL. Overrides the postgres_* values.
        db_pool_size: Connection pool size for server databases.
        db_echo: Log every SQL statement.
        create_schema: Create the books table at startup when missing.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Book Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    http_host: str = "0.0.0.0"
    http_port: int = 8080
    request_timeout_seconds: Optional[float] = None

    cors_allowed_origins: list[str] = ["http://localhost:3000"]
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "books"
    db_pool_size: int = 5
    db_echo: bool = False
    create_schema: bool = True

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Built from postgres_* values (useful for Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
