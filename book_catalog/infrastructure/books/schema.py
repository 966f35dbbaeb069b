"""
Table definition for the books bounded context.

The schema is declared explicitly with SQLAlchemy Core so the
unique index on isbn is visible in one place:

    books(
        id               UUID          PRIMARY KEY,
        title            VARCHAR(255)  NOT NULL,
        author           VARCHAR(255)  NOT NULL,
        isbn             VARCHAR(32)   NOT NULL,
        publication_date DATE          NULL,
        CONSTRAINT uk_books_isbn UNIQUE (isbn)
    )
"""

import logging

from sqlalchemy import (
    Column,
    Date,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.engine import Engine

from book_catalog.domain.books.entities import (
    AUTHOR_MAX_LEN,
    ISBN_MAX_LEN,
    TITLE_MAX_LEN,
)

logger = logging.getLogger(__name__)

ISBN_UNIQUE_CONSTRAINT = "uk_books_isbn"

metadata = MetaData()

books_table = Table(
    "books",
    metadata,
    Column("id", Uuid(as_uuid=True), primary_key=True),
    Column("title", String(TITLE_MAX_LEN), nullable=False),
    Column("author", String(AUTHOR_MAX_LEN), nullable=False),
    Column("isbn", String(ISBN_MAX_LEN), nullable=False),
    Column("publication_date", Date, nullable=True),
    UniqueConstraint("isbn", name=ISBN_UNIQUE_CONSTRAINT),
)


def ensure_schema(engine: Engine) -> None:
    """Create the books table and its unique index if they do not exist."""
    metadata.create_all(engine, checkfirst=True)
    logger.info("Ensured table %s exists.", books_table.name)
