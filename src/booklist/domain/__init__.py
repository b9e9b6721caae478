"""Value types shared by the stores and the synchronized list.

Re-exports all public types for convenient access:
    from booklist.domain import Book, Position, Record
"""
from booklist.domain.book import Book
from booklist.domain.position import Position
from booklist.domain.types import Offset, ParsableRecord, Record

__all__ = [
    "Book",
    "Offset",
    "ParsableRecord",
    "Position",
    "Record",
]
