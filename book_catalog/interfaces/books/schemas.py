"""
Pydantic schemas for books API request/response validation.

These schemas enforce input validation and define the API contract.
Field names are snake_case in Python and camelCase on the wire.
"""

import re
from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from book_catalog.domain.books.entities import (
    AUTHOR_MAX_LEN,
    ISBN_MAX_LEN,
    TITLE_MAX_LEN,
)

MAX_LENGTHS = {
    "title": TITLE_MAX_LEN,
    "author": AUTHOR_MAX_LEN,
    "isbn": ISBN_MAX_LEN,
}

CALENDAR_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookRequest(CamelModel):
    """Request schema for creating or replacing a book.

    Attributes:
        title: Non-blank, at most 255 characters.
        author: Non-blank, at most 255 characters.
        isbn: Non-blank, at most 32 characters. Unique across the catalog.
        publication_date: Optional ISO-8601 calendar date (YYYY-MM-DD).
    """

    title: str = Field(..., description="Book title", examples=["Dune"])
    author: str = Field(..., description="Author name", examples=["Frank Herbert"])
    isbn: str = Field(..., description="ISBN, unique", examples=["9780441013593"])
    publication_date: Optional[date] = Field(
        default=None, description="Publication date (YYYY-MM-DD)"
    )

    @field_validator("title", "author", "isbn")
    @classmethod
    def check_not_blank_and_size(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise PydanticCustomError("not_blank", "must not be blank")
        max_length = MAX_LENGTHS[info.field_name]
        if len(value) > max_length:
            raise PydanticCustomError(
                "size",
                "size must be between 0 and {max_length}",
                {"max_length": max_length},
            )
        return value

    @field_validator("publication_date", mode="before")
    @classmethod
    def check_calendar_date(cls, value: Any) -> Any:
        # Timestamps and epoch numbers are rejected, not truncated to a day.
        if value is None or (isinstance(value, date) and not isinstance(value, datetime)):
            return value
        if isinstance(value, str) and CALENDAR_DATE.fullmatch(value):
            return value
        raise PydanticCustomError("date_format", "must be a date in YYYY-MM-DD format")


class BookResponse(CamelModel):
    """Response schema for a stored book."""

    id: UUID
    title: str
    author: str
    isbn: str
    publication_date: Optional[date] = None


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error envelope returned by all error handlers."""

    timestamp: str
    status: int
    error: str
    message: str
    value: Optional[str] = None
    fields: Optional[dict[str, str]] = None
    detail: Optional[str] = None
