"""Tests for compare() and the relational operators."""
import pytest

from booklist.book_list import SynchronizedOrderedList

from .conftest import A, B, C


def make(*books):
    return SynchronizedOrderedList(books, capacity=5)


def test_equal_lists():
    assert make(A, B).compare(make(A, B)) == 0
    assert make(A, B) == make(A, B)
    assert not make(A, B) != make(A, B)
    assert make(A, B) <= make(A, B)
    assert make(A, B) >= make(A, B)


def test_empty_lists_are_equal():
    assert make().compare(make()) == 0


def test_shorter_sorts_first_with_equal_prefix():
    assert make(A).compare(make(A, B)) == -1
    assert make(A) < make(A, B)
    assert make(A, B) > make(A)


def test_length_beats_content():
    # [C] holds the larger record but is shorter
    assert make(C) < make(A, B)


def test_first_difference_decides():
    assert make(A, B).compare(make(A, C)) == -1
    assert make(A, C).compare(make(A, B)) == 1
    assert make(A, B) < make(A, C)
    assert make(A, C) >= make(A, B)
    assert make(A, B) != make(A, C)


def test_order_matters():
    assert make(A, B) != make(B, A)
    assert make(A, B) < make(B, A)


def test_capacity_does_not_affect_equality():
    assert SynchronizedOrderedList([A], capacity=1) == SynchronizedOrderedList([A], capacity=9)


def test_comparison_with_other_types():
    assert make(A) != [A]
    assert not make(A) == (A,)
    with pytest.raises(TypeError):
        make(A) < [A]  # noqa: B015


def test_unhashable():
    with pytest.raises(TypeError):
        hash(make(A))
