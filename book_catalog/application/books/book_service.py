"""
Service: Manage the book catalog.

Operations: create, find_all, find_by_id, update, delete.
Side effects: writes to the books table inside one transaction per call.
Failure cases: BookNotFoundError, DuplicateIsbnError.
"""

import logging
from uuid import UUID

from book_catalog.application.books.dtos import BookCommand, BookResult
from book_catalog.application.books.mapper import (
    apply_update,
    to_entity,
    to_response,
)
from book_catalog.domain.books.errors import (
    BookNotFoundError,
    ConstraintViolationError,
    DuplicateIsbnError,
)
from book_catalog.domain.books.ports import BookUnitOfWork

logger = logging.getLogger(__name__)


class BookService:
    """Business rules for the book catalog.

    The ISBN pre-check only produces a clean error in the common case.
    The unique index in the store is authoritative, so constraint
    violations raised by the store on write paths are also reported
    as DuplicateIsbnError.
    """

    def __init__(self, uow: BookUnitOfWork) -> None:
        """Initialize the service.

        Args:
            uow: Unit of work handing out connection-bound repositories.
        """
        self._uow = uow

    def create(self, command: BookCommand) -> BookResult:
        """Create a book.

        Args:
            command: Validated book fields.

        Returns:
            The stored book, including its generated id.

        Raises:
            DuplicateIsbnError: If the ISBN is already taken.
        """
        try:
            with self._uow.transaction() as repo:
                if repo.exists_by_isbn(command.isbn):
                    raise DuplicateIsbnError(command.isbn)
                saved = repo.insert(to_entity(command))
        except ConstraintViolationError:
            logger.warning("Insert rejected by unique index: isbn=%s", command.isbn)
            raise DuplicateIsbnError(command.isbn) from None

        logger.info("Created book id=%s", saved.id)
        return to_response(saved)

    def find_all(self) -> list[BookResult]:
        """Return every book, possibly an empty list."""
        with self._uow.read_only() as repo:
            books = repo.find_all()
        return [to_response(book) for book in books]

    def find_by_id(self, book_id: UUID) -> BookResult:
        """Return a single book.

        Raises:
            BookNotFoundError: If no book has this id.
        """
        with self._uow.read_only() as repo:
            book = repo.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return to_response(book)

    def update(self, book_id: UUID, command: BookCommand) -> BookResult:
        """Replace all mutable fields of an existing book.

        Args:
            book_id: Id of the book to replace.
            command: Validated new field values.

        Returns:
            The book as stored after the update.

        Raises:
            BookNotFoundError: If no book has this id.
            DuplicateIsbnError: If the new ISBN belongs to another book.
        """
        try:
            with self._uow.transaction() as repo:
                book = repo.find_by_id(book_id)
                if book is None:
                    raise BookNotFoundError(book_id)

                if book.isbn != command.isbn and repo.exists_by_isbn(command.isbn):
                    raise DuplicateIsbnError(command.isbn)

                apply_update(book, command)
                if not repo.update(book):
                    raise BookNotFoundError(book_id)
        except ConstraintViolationError:
            logger.warning("Update rejected by unique index: isbn=%s", command.isbn)
            raise DuplicateIsbnError(command.isbn) from None

        logger.info("Updated book id=%s", book_id)
        return to_response(book)

    def delete(self, book_id: UUID) -> None:
        """Delete a book.

        A concurrent delete between the existence check and the delete
        is reported as BookNotFoundError as well.

        Raises:
            BookNotFoundError: If no book has this id.
        """
        with self._uow.transaction() as repo:
            if not repo.exists_by_id(book_id):
                raise BookNotFoundError(book_id)
            if not repo.delete_by_id(book_id):
                raise BookNotFoundError(book_id)

        logger.info("Deleted book id=%s", book_id)
