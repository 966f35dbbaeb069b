"""
Port interfaces (ABCs) for the books bounded context.

Ports define the contracts that the service requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from uuid import UUID

from book_catalog.domain.books.entities import Book


class BookRepository(ABC):
    """Port for persisting and retrieving books.

    A repository instance is bound to one connection for the duration
    of a unit of work.
    """

    @abstractmethod
    def insert(self, book: Book) -> Book:
        """Persist a new book and return it with its id populated.

        Raises:
            ConstraintViolationError: If the ISBN already exists.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, book_id: UUID) -> Optional[Book]:
        """Return the book with the given id, or None."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Book]:
        """Return every stored book. Order is unspecified."""
        raise NotImplementedError

    @abstractmethod
    def update(self, book: Book) -> bool:
        """Write all mutable fields back by primary key.

        Returns:
            True if a row was written, False if the id no longer exists.

        Raises:
            ConstraintViolationError: If the new ISBN collides with another row.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, book_id: UUID) -> bool:
        """Remove the book. Returns True if a row was removed."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, book_id: UUID) -> bool:
        raise NotImplementedError

    @abstractmethod
    def exists_by_isbn(self, isbn: str) -> bool:
        raise NotImplementedError


class BookUnitOfWork(ABC):
    """Port that scopes repository access to a connection.

    ``transaction()`` commits on normal exit and rolls back on any
    exception. ``read_only()`` never writes.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager[BookRepository]:
        raise NotImplementedError

    @abstractmethod
    def read_only(self) -> AbstractContextManager[BookRepository]:
        raise NotImplementedError
