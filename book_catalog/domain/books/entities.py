"""
Domain entities for the books bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID

TITLE_MAX_LEN = 255
AUTHOR_MAX_LEN = 255
ISBN_MAX_LEN = 32


@dataclass
class Book:
    """A catalog record.

    The id is assigned by the store on insert and never changes afterwards.
    The remaining fields are replaced together on update.
    """

    title: str
    author: str
    isbn: str
    publication_date: Optional[date] = None
    id: Optional[UUID] = None
