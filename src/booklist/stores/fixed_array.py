"""Fixed-capacity array store: pre-allocated slots plus a size counter.

This is the bounded contiguous layout: a list of `capacity` slots
that is allocated once and never resized. Only the first
`len(store)` slots hold records; the rest are None.

Insert and remove are done by hand, one slot at a time:

    shift_right(2) on [A, B, C, D, _]  ->  [A, B, _, C, D]   then place
    shift_left(1)  on [A, B, C, D, _]  ->  [A, C, D, _, _]

Because the capacity never grows, this store is the binding size
limit for the whole synchronized list.
"""
from __future__ import annotations

import copy
from typing import Iterator, TypeVar

from booklist.stores.base import SequenceStoreBase

T = TypeVar("T")


class FixedArrayStore(SequenceStoreBase[T]):
    """Bounded store of at most `capacity` records.

    INVARIANT: slots[0:size] hold records, slots[size:] are None.
    """

    __slots__ = ("_slots", "_size")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[T | None] = [None] * capacity
        self._size: int = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._size >= len(self._slots)

    def shift_right(self, offset: int) -> None:
        """Open a hole at offset by moving slots[offset:size] one slot right.

        Grows the size counter by one. The caller fills the hole with
        __setitem__. Raises OverflowError if every slot is already used.
        """
        if self.is_full():
            raise OverflowError(
                f"FixedArrayStore is full ({self.capacity} slots)"
            )
        for i in range(self._size, offset, -1):
            self._slots[i] = self._slots[i - 1]
        self._slots[offset] = None
        self._size += 1

    def shift_left(self, offset: int) -> None:
        """Close the hole at offset by moving slots[offset+1:size] one slot left.

        The vacated tail slot is cleared and the size counter shrinks
        by one.
        """
        for i in range(offset, self._size - 1):
            self._slots[i] = self._slots[i + 1]
        self._slots[self._size - 1] = None
        self._size -= 1

    def __setitem__(self, offset: int, record: T) -> None:
        if not 0 <= offset < self._size:
            raise IndexError(
                f"Slot {offset} out of range (store holds {self._size} records)"
            )
        self._slots[offset] = record

    def __getitem__(self, offset: int) -> T:
        if not 0 <= offset < self._size:
            raise IndexError(
                f"Slot {offset} out of range (store holds {self._size} records)"
            )
        return self._slots[offset]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._slots[i]  # type: ignore[misc]

    def clear(self) -> None:
        for i in range(self._size):
            self._slots[i] = None
        self._size = 0

    def copy(self) -> FixedArrayStore[T]:
        other: FixedArrayStore[T] = FixedArrayStore(self.capacity)
        other._slots = [copy.copy(slot) for slot in self._slots]
        other._size = self._size
        return other

    def __repr__(self) -> str:
        return f"FixedArrayStore({list(self)!r}, capacity={self.capacity})"
