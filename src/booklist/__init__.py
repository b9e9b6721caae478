"""booklist: one ordered list of records mirrored across four containers.

The same sequence lives in a fixed-capacity array, a dynamic array, a
singly-linked list and a doubly-linked list. Every mutation is fanned
out to all four and followed by a consistency check, so the four
implementations can be compared side by side while presenting a single
ordered-list abstraction.

    from booklist import Book, BookList, Position
"""
from booklist.book_list import DEFAULT_CAPACITY, BookList, SynchronizedOrderedList
from booklist.consistency import (
    ConsistencyReport,
    ConsistencyVerifier,
    containers_are_consistent,
)
from booklist.domain import Book, Position, Record
from booklist.errors import (
    BookListError,
    CapacityExceededError,
    InvalidInternalStateError,
    InvalidOffsetError,
    SerializationError,
)
from booklist.serialization import dump, dumps, load, load_into, loads

__all__ = [
    "DEFAULT_CAPACITY",
    "Book",
    "BookList",
    "BookListError",
    "CapacityExceededError",
    "ConsistencyReport",
    "ConsistencyVerifier",
    "InvalidInternalStateError",
    "InvalidOffsetError",
    "Position",
    "Record",
    "SerializationError",
    "SynchronizedOrderedList",
    "containers_are_consistent",
    "dump",
    "dumps",
    "load",
    "load_into",
    "loads",
]
