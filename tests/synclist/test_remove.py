"""Tests for remove, remove_record and move_to_top."""
import pytest

from .conftest import A, B, C, D, assert_stores_hold


class TestRemoveByOffset:

    @pytest.mark.parametrize(
        "offset, expected",
        [(0, [B, C]), (1, [A, C]), (2, [A, B])],
    )
    def test_remove_valid_offset(self, abc_list, offset, expected):
        abc_list.remove(offset)
        assert_stores_hold(abc_list, expected)

    @pytest.mark.parametrize("offset", [3, 4, 100, -1])
    def test_out_of_range_is_noop(self, abc_list, offset):
        result = abc_list.remove(offset)
        assert result is abc_list
        assert_stores_hold(abc_list, [A, B, C])

    def test_remove_from_empty_is_noop(self, empty_list):
        empty_list.remove(0)
        assert_stores_hold(empty_list, [])

    def test_remove_until_empty(self, abc_list):
        expected = [A, B, C]
        while expected:
            abc_list.remove(len(expected) - 1)
            expected.pop()
            assert_stores_hold(abc_list, expected)

    def test_relative_order_preserved(self, abc_list):
        abc_list.insert(D)
        abc_list.remove(1)
        assert_stores_hold(abc_list, [A, C, D])


class TestRemoveRecord:

    def test_remove_present_record(self, abc_list):
        abc_list.remove_record(B)
        assert_stores_hold(abc_list, [A, C])

    def test_remove_absent_record_is_noop(self, abc_list):
        abc_list.remove_record(D)
        assert_stores_hold(abc_list, [A, B, C])


class TestMoveToTop:

    def test_moves_present_record(self, abc_list):
        abc_list.move_to_top(C)
        assert_stores_hold(abc_list, [C, A, B])

    def test_top_record_stays(self, abc_list):
        abc_list.move_to_top(A)
        assert_stores_hold(abc_list, [A, B, C])

    def test_absent_record_is_noop(self, abc_list):
        abc_list.move_to_top(D)
        assert_stores_hold(abc_list, [A, B, C])

    def test_works_on_a_full_list(self):
        from booklist.book_list import SynchronizedOrderedList

        full = SynchronizedOrderedList([A, B, C], capacity=3)
        full.move_to_top(B)
        assert_stores_hold(full, [B, A, C])


def test_walkthrough(empty_list):
    """Insert B, A, C at the bottom, then promote, remove and query."""
    for book in [B, A, C]:
        empty_list.insert(book)
    assert_stores_hold(empty_list, [B, A, C])

    empty_list.move_to_top(C)
    assert_stores_hold(empty_list, [C, B, A])

    empty_list.remove(1)
    assert_stores_hold(empty_list, [C, A])

    assert empty_list.find(A) == 1
    assert empty_list.size() == 2
