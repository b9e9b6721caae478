"""Error taxonomy for the synchronized list.

Two families:

- BookListError and its subclasses are caller-input problems (bad
  offset, full list, unreadable stream). They are raised before any
  store is touched and the list is left as it was.
- InvalidInternalStateError means the four stores disagree. That can
  only happen through a defect in the mutation code, so it derives from
  AssertionError rather than BookListError: an `except BookListError`
  around normal calls will never hide it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from booklist.consistency import ConsistencyReport


class BookListError(Exception):
    """Base class for recoverable, caller-input errors."""


class InvalidOffsetError(BookListError, IndexError):
    """Raised when an insert offset lies beyond the end of the list."""

    def __init__(self, offset: int, size: int) -> None:
        self.offset = offset
        self.size = size
        super().__init__(
            f"Insertion offset {offset} outside [0, {size}] for list of size {size}"
        )


class CapacityExceededError(BookListError, OverflowError):
    """Raised when the fixed-capacity store has no free slot left."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Capacity exceeded: list already holds {capacity} records")


class SerializationError(BookListError, ValueError):
    """Raised when a text stream does not hold a well-formed list."""


class InvalidInternalStateError(AssertionError):
    """Raised when the stores have diverged from one another."""

    def __init__(self, message: str, report: ConsistencyReport | None = None) -> None:
        self.report = report
        if report is not None and report.error_message:
            message = f"{message}: {report.error_message}"
        super().__init__(message)
