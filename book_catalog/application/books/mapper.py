"""
Pure transformations between BookCommand, Book and BookResult.

No IO happens here.
"""

from book_catalog.application.books.dtos import BookCommand, BookResult
from book_catalog.domain.books.entities import Book


def to_entity(command: BookCommand) -> Book:
    """Build a new, not yet persisted, Book from a command."""
    return Book(
        title=command.title,
        author=command.author,
        isbn=command.isbn,
        publication_date=command.publication_date,
    )


def to_response(book: Book) -> BookResult:
    return BookResult(
        id=book.id,
        title=book.title,
        author=book.author,
        isbn=book.isbn,
        publication_date=book.publication_date,
    )


def apply_update(book: Book, command: BookCommand) -> None:
    """Replace the four mutable fields of ``book`` in place."""
    book.title = command.title
    book.author = command.author
    book.isbn = command.isbn
    book.publication_date = command.publication_date
