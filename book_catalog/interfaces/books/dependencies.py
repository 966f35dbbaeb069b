"""
Dependency injection for the books bounded context.

The service is built once in the composition root (``create_app``)
and stored on ``app.state``; routes receive it through this dependency.
"""

from fastapi import Request

from book_catalog.application.books.book_service import BookService


def get_book_service(request: Request) -> BookService:
    """Return the BookService built at startup."""
    return request.app.state.book_service
