"""Dynamic array store: a plain Python list.

The growable contiguous layout. Positional insert and erase are the
list's own operations; everything after the edit point is moved by
CPython in one memmove. This is the store the synchronized list treats
as authoritative for reads once consistency has been verified.
"""
from __future__ import annotations

import copy
from typing import Iterator, TypeVar

from booklist.stores.base import SequenceStoreBase

T = TypeVar("T")


class DynamicArrayStore(SequenceStoreBase[T]):
    """Store records in a list[T]. Size is always len(self._items)."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def insert(self, offset: int, record: T) -> None:
        """Insert before the record at offset (offset == len appends)."""
        self._items.insert(offset, record)

    def erase(self, offset: int) -> None:
        del self._items[offset]

    def __getitem__(self, offset: int) -> T:
        return self._items[offset]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> DynamicArrayStore[T]:
        other: DynamicArrayStore[T] = DynamicArrayStore()
        other._items = [copy.copy(record) for record in self._items]
        return other
