"""Singly-linked store: a forward-only chain behind a before-head sentinel.

Each node knows only its successor, so a node can be inserted or
unlinked only through its *predecessor*. The sentinel node sitting in
front of the first record makes offset 0 no different from any other
offset:

    sentinel -> A -> B -> C -> None

    insert at offset 1:  advance(sentinel, 1) is A, insert_after(A, X)
    erase at offset 0:   advance(sentinel, 0) is the sentinel, erase_after(it)

The store keeps no size counter. len() walks the chain from the
sentinel to the first None link and counts the nodes it passes.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Iterator, TypeVar

from booklist.stores.base import SequenceStoreBase

T = TypeVar("T")


@dataclass(slots=True)
class ForwardNode:
    """One link in the chain. The sentinel's value is None."""
    value: Any
    next: ForwardNode | None = None


class SinglyLinkedStore(SequenceStoreBase[T]):
    """Forward-linked chain of records."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head = ForwardNode(None)

    def before_begin(self) -> ForwardNode:
        """The sentinel node that precedes offset 0."""
        return self._head

    @staticmethod
    def advance(node: ForwardNode, steps: int) -> ForwardNode:
        """Follow `steps` next links from node.

        Raises IndexError if the chain ends first.
        """
        for taken in range(steps):
            if node.next is None:
                raise IndexError(
                    f"Chain ended after {taken} of {steps} steps"
                )
            node = node.next
        return node

    def insert_after(self, node: ForwardNode, record: T) -> ForwardNode:
        """Link a new node holding record right after node."""
        node.next = ForwardNode(record, node.next)
        return node.next

    def erase_after(self, node: ForwardNode) -> None:
        """Unlink the node right after node. Raises IndexError if there is none."""
        victim = node.next
        if victim is None:
            raise IndexError("erase_after called on the last node")
        node.next = victim.next
        victim.next = None

    def __len__(self) -> int:
        count = 0
        node = self._head.next
        while node is not None:
            count += 1
            node = node.next
        return count

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def clear(self) -> None:
        self._head.next = None

    def copy(self) -> SinglyLinkedStore[T]:
        other: SinglyLinkedStore[T] = SinglyLinkedStore()
        tail = other._head
        for record in self:
            tail = other.insert_after(tail, copy.copy(record))
        return other
