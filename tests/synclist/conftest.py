"""Shared fixtures for the synchronized list tests."""
from __future__ import annotations

import pytest

from booklist.book_list import SynchronizedOrderedList
from booklist.domain.book import Book

# Books with ISBNs in ascending order, so A < B < C < ... by record order.
A = Book("0-001", "Algorithms", "Sedgewick", 80.00)
B = Book("0-002", "Blue Book", "Evans", 55.50)
C = Book("0-003", "Compilers", "Aho", 99.99)
D = Book("0-004", "Data Structures", "Goodrich", 70.25)
E = Book("0-005", "Effective Python", "Slatkin", 39.95)
F = Book("0-006", "Fluent Python", "Ramalho", 59.99)

STORE_NAMES = ("fixed_array", "dynamic_array", "singly_linked", "doubly_linked")


def assert_stores_hold(book_list: SynchronizedOrderedList, expected: list) -> None:
    """All four stores hold exactly `expected`, in order."""
    snapshots = book_list.stores()
    assert set(snapshots) == set(STORE_NAMES)
    for name in STORE_NAMES:
        assert list(snapshots[name]) == expected, name
    assert book_list.size() == len(expected)


@pytest.fixture
def empty_list() -> SynchronizedOrderedList[Book]:
    return SynchronizedOrderedList(capacity=5)


@pytest.fixture
def abc_list() -> SynchronizedOrderedList[Book]:
    """[A, B, C] in a list of capacity 5."""
    return SynchronizedOrderedList([A, B, C], capacity=5)
