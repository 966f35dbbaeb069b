"""
Adapter: Book persistence.

Implements the BookRepository and BookUnitOfWork ports on top of
SQLAlchemy Core. Each repository instance is bound to one connection;
the unit of work decides whether that connection runs a transaction.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.engine import Connection, Engine, Row
from sqlalchemy.exc import IntegrityError

from book_catalog.domain.books.entities import Book
from book_catalog.domain.books.errors import ConstraintViolationError
from book_catalog.domain.books.ports import BookRepository, BookUnitOfWork
from book_catalog.infrastructure.books.schema import (
    ISBN_UNIQUE_CONSTRAINT,
    books_table,
)

logger = logging.getLogger(__name__)


def _row_to_book(row: Row) -> Book:
    return Book(
        id=row.id,
        title=row.title,
        author=row.author,
        isbn=row.isbn,
        publication_date=row.publication_date,
    )


class SqlBookRepository(BookRepository):
    """Relational implementation of the BookRepository port."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def insert(self, book: Book) -> Book:
        """Insert a new row, generating the id when it is unset.

        Args:
            book: Entity to persist. Its id is filled in place.

        Returns:
            The same entity with its id populated.

        Raises:
            ConstraintViolationError: If the ISBN is already stored.
        """
        if book.id is None:
            book.id = uuid4()
        try:
            self._conn.execute(
                insert(books_table).values(
                    id=book.id,
                    title=book.title,
                    author=book.author,
                    isbn=book.isbn,
                    publication_date=book.publication_date,
                )
            )
        except IntegrityError as exc:
            raise ConstraintViolationError(ISBN_UNIQUE_CONSTRAINT) from exc
        logger.debug("Inserted book id=%s", book.id)
        return book

    def find_by_id(self, book_id: UUID) -> Optional[Book]:
        row = self._conn.execute(
            select(books_table).where(books_table.c.id == book_id)
        ).first()
        return _row_to_book(row) if row is not None else None

    def find_all(self) -> list[Book]:
        rows = self._conn.execute(select(books_table)).fetchall()
        return [_row_to_book(row) for row in rows]

    def update(self, book: Book) -> bool:
        """Write title, author, isbn and publication date by primary key.

        Raises:
            ConstraintViolationError: If the new ISBN is owned by another row.
        """
        try:
            result = self._conn.execute(
                update(books_table)
                .where(books_table.c.id == book.id)
                .values(
                    title=book.title,
                    author=book.author,
                    isbn=book.isbn,
                    publication_date=book.publication_date,
                )
            )
        except IntegrityError as exc:
            raise ConstraintViolationError(ISBN_UNIQUE_CONSTRAINT) from exc
        return result.rowcount > 0

    def delete_by_id(self, book_id: UUID) -> bool:
        result = self._conn.execute(
            delete(books_table).where(books_table.c.id == book_id)
        )
        return result.rowcount > 0

    def exists_by_id(self, book_id: UUID) -> bool:
        return bool(
            self._conn.execute(
                select(exists().where(books_table.c.id == book_id))
            ).scalar()
        )

    def exists_by_isbn(self, isbn: str) -> bool:
        return bool(
            self._conn.execute(
                select(exists().where(books_table.c.isbn == isbn))
            ).scalar()
        )


class SqlBookUnitOfWork(BookUnitOfWork):
    """Hands out connection-bound repositories from a shared Engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @contextmanager
    def transaction(self) -> Iterator[BookRepository]:
        """Yield a repository inside BEGIN ... COMMIT.

        Any exception leaving the block rolls the transaction back.
        """
        with self._engine.begin() as conn:
            yield SqlBookRepository(conn)

    @contextmanager
    def read_only(self) -> Iterator[BookRepository]:
        with self._engine.connect() as conn:
            yield SqlBookRepository(conn)
