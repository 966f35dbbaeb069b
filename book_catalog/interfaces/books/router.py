"""
FastAPI router for the books bounded context.

All routes delegate to BookService. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from book_catalog.application.books.book_service import BookService
from book_catalog.application.books.dtos import BookCommand, BookResult
from book_catalog.interfaces.books.dependencies import get_book_service
from book_catalog.interfaces.books.schemas import (
    BookRequest,
    BookResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/books", tags=["books"])

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}
CONFLICT = {409: {"model": ErrorResponse}}


def _to_command(request: BookRequest) -> BookCommand:
    return BookCommand(
        title=request.title,
        author=request.author,
        isbn=request.isbn,
        publication_date=request.publication_date,
    )


def _to_response(result: BookResult) -> BookResponse:
    return BookResponse(
        id=result.id,
        title=result.title,
        author=result.author,
        isbn=result.isbn,
        publication_date=result.publication_date,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BookResponse,
    responses={**BAD_REQUEST, **CONFLICT},
    summary="Create a book",
    description="Create a book. The response carries a Location header.",
)
def create_book(
    request: BookRequest,
    response: Response,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Create a book and point the Location header at it."""
    result = service.create(_to_command(request))
    response.headers["Location"] = f"{router.prefix}/{result.id}"
    return _to_response(result)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
)
def list_books(
    service: BookService = Depends(get_book_service),
) -> list[BookResponse]:
    return [_to_response(r) for r in service.find_all()]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a book",
)
def get_book(
    book_id: UUID,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    return _to_response(service.find_by_id(book_id))


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **CONFLICT},
    summary="Replace a book",
    description="Replace title, author, isbn and publication date of a book.",
)
def update_book(
    book_id: UUID,
    request: BookRequest,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Fully replace the mutable fields of a book."""
    return _to_response(service.update(book_id, _to_command(request)))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a book",
)
def delete_book(
    book_id: UUID,
    service: BookService = Depends(get_book_service),
) -> Response:
    service.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
