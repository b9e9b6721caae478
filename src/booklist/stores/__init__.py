"""Sequence stores: four container implementations of one ordered list.

Each store keeps the same sequence in a different physical layout:
a bounded contiguous array, a growable contiguous array, a singly-linked
chain and a doubly-linked ring. They all implement SequenceStoreBase for
reading; the mutation primitives are the ones natural to each layout,
and the synchronized list composes them.
"""
from booklist.stores.base import SequenceStoreBase
from booklist.stores.doubly_linked import DoublyLinkedStore
from booklist.stores.dynamic_array import DynamicArrayStore
from booklist.stores.fixed_array import FixedArrayStore
from booklist.stores.singly_linked import SinglyLinkedStore

__all__ = [
    "DoublyLinkedStore",
    "DynamicArrayStore",
    "FixedArrayStore",
    "SequenceStoreBase",
    "SinglyLinkedStore",
]
