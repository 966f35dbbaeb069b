"""
Domain-specific errors for the books bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from uuid import UUID


class BookDomainError(Exception):
    """Base error for all books domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BookNotFoundError(BookDomainError):
    """Raised when no book exists with the requested id."""

    def __init__(self, book_id: UUID) -> None:
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id


class DuplicateIsbnError(BookDomainError):
    """Raised when an ISBN is already owned by another book."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"ISBN already exists: {isbn}")
        self.isbn = isbn


class ConstraintViolationError(BookDomainError):
    """Raised by a store when a write violates a database constraint.

    The service converts it into DuplicateIsbnError on write paths.
    """

    def __init__(self, constraint: str) -> None:
        super().__init__(f"Constraint violated: {constraint}")
        self.constraint = constraint
