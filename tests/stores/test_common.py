"""Behaviour every store shares through SequenceStoreBase."""
from booklist.stores.base import SequenceStoreBase

from .conftest import LETTERS


def test_is_a_sequence_store(filled_store):
    assert isinstance(filled_store, SequenceStoreBase)


def test_iterates_top_to_bottom(filled_store):
    assert list(filled_store) == LETTERS
    assert len(filled_store) == len(LETTERS)


def test_snapshot_is_a_tuple(filled_store):
    assert filled_store.snapshot() == tuple(LETTERS)


def test_copy_has_same_kind_and_contents(filled_store):
    clone = filled_store.copy()
    assert type(clone) is type(filled_store)
    assert clone.snapshot() == filled_store.snapshot()


def test_repr_names_the_store(filled_store):
    assert type(filled_store).__name__ in repr(filled_store)
