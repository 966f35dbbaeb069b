"""
Data Transfer Objects for the books application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class BookCommand:
    """Input DTO for creating or fully replacing a book.

    Attributes:
        title: Book title, already validated by the interface layer.
        author: Author name.
        isbn: ISBN, treated as an opaque unique key.
        publication_date: Optional publication date.
    """

    title: str
    author: str
    isbn: str
    publication_date: Optional[date] = None


@dataclass(frozen=True)
class BookResult:
    """Output DTO for a stored book."""

    id: UUID
    title: str
    author: str
    isbn: str
    publication_date: Optional[date]
