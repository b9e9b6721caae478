"""Doubly-linked store: a circular ring around a root sentinel.

Every node links to both neighbours, and the root sentinel closes the
ring, so the chain never has a None end to special-case:

    root <-> A <-> B <-> C <-> (back to root)

The root also serves as the "end" position: node_at(len(store)) returns
it, and inserting before the root appends. Because links run both ways,
node_at walks from whichever end of the ring is closer to the offset.

Size is tracked in a counter, updated on every splice and unlink.
"""
from __future__ import annotations

import copy
from typing import Any, Iterator, TypeVar

from booklist.stores.base import SequenceStoreBase

T = TypeVar("T")


class Link:
    """Ring node. prev/next are always set once the node is in a ring."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Link = self
        self.next: Link = self


class DoublyLinkedStore(SequenceStoreBase[T]):
    """Circular doubly-linked list of records."""

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root = Link(None)
        self._size: int = 0

    def node_at(self, offset: int) -> Link:
        """Return the node at offset, or the root sentinel for offset == len.

        Walks forward from the head for the first half of the list and
        backward from the tail for the second half.
        Raises IndexError for offsets outside [0, len].
        """
        if not 0 <= offset <= self._size:
            raise IndexError(
                f"Offset {offset} out of range (store holds {self._size} records)"
            )
        if offset <= self._size // 2:
            node = self._root.next
            for _ in range(offset):
                node = node.next
        else:
            node = self._root
            for _ in range(self._size - offset):
                node = node.prev
        return node

    def insert_before(self, at: Link, record: T) -> Link:
        """Splice a new node holding record in front of `at`."""
        node = Link(record)
        node.prev = at.prev
        node.next = at
        at.prev.next = node
        at.prev = node
        self._size += 1
        return node

    def erase(self, node: Link) -> None:
        """Unlink node from the ring. The root sentinel cannot be erased."""
        if node is self._root:
            raise IndexError("Cannot erase the end position")
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._root.next
        while node is not self._root:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._root.prev
        while node is not self._root:
            yield node.value
            node = node.prev

    def clear(self) -> None:
        self._root.prev = self._root.next = self._root
        self._size = 0

    def copy(self) -> DoublyLinkedStore[T]:
        other: DoublyLinkedStore[T] = DoublyLinkedStore()
        for record in self:
            other.insert_before(other._root, copy.copy(record))
        return other
