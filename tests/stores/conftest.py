"""Shared fixtures for the container store tests."""
from __future__ import annotations

import pytest

from booklist.stores import (
    DoublyLinkedStore,
    DynamicArrayStore,
    FixedArrayStore,
    SinglyLinkedStore,
)

LETTERS = ["A", "B", "C", "D", "E"]


def fill_singly(records: list) -> SinglyLinkedStore:
    """Build a singly-linked store holding records in order."""
    store: SinglyLinkedStore = SinglyLinkedStore()
    tail = store.before_begin()
    for record in records:
        tail = store.insert_after(tail, record)
    return store


def fill_doubly(records: list) -> DoublyLinkedStore:
    """Build a doubly-linked store holding records in order."""
    store: DoublyLinkedStore = DoublyLinkedStore()
    for record in records:
        store.insert_before(store.node_at(len(store)), record)
    return store


def fill_fixed(records: list, capacity: int = 5) -> FixedArrayStore:
    """Build a fixed array store holding records in order."""
    store: FixedArrayStore = FixedArrayStore(capacity)
    for record in records:
        end = len(store)
        store.shift_right(end)
        store[end] = record
    return store


def fill_dynamic(records: list) -> DynamicArrayStore:
    store: DynamicArrayStore = DynamicArrayStore()
    for record in records:
        store.insert(len(store), record)
    return store


@pytest.fixture(params=["fixed", "dynamic", "singly", "doubly"])
def filled_store(request):
    """Each store kind holding A..E, for checks shared by all four."""
    builders = {
        "fixed": fill_fixed,
        "dynamic": fill_dynamic,
        "singly": fill_singly,
        "doubly": fill_doubly,
    }
    return builders[request.param](list(LETTERS))
