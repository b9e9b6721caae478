"""Container consistency checking.

The synchronized list is only correct while its four stores agree: same
length, and the same record at every offset. This module offers that
check in two forms:

- containers_are_consistent(*stores): the fast yes/no oracle, called at
  the start of every query and the end of every mutation.
- ConsistencyVerifier(stores).verify(): the diagnostic form. It reports
  each store's length and the first offset where the contents diverge,
  and is only run once the oracle has already said no.

Both are pure queries: neither touches the stores.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from booklist.stores.base import SequenceStoreBase


def containers_are_consistent(*stores: SequenceStoreBase) -> bool:
    """True iff all stores have equal length and equal records in order.

    Lengths are compared first (cheap for three of the four stores),
    then the stores are walked in lockstep. Time complexity: O(n).
    """
    if not stores:
        return True
    sizes = {len(store) for store in stores}
    if len(sizes) != 1:
        return False

    for records in zip(*stores):
        first = records[0]
        if any(first != other for other in records[1:]):
            return False
    return True


@dataclass(frozen=True, slots=True)
class ConsistencyReport:
    """Result of a consistency verification."""

    is_consistent: bool
    sizes: dict[str, int] = field(default_factory=dict)
    first_mismatch: int | None = None
    error_message: str | None = None


class ConsistencyVerifier:
    """Explains *how* a set of named stores disagree.

    The verifier walks the stores the same way the oracle does but
    keeps track of where it is, so the resulting report can name the
    offending store sizes or the first offset with differing records.
    """

    def __init__(self, stores: Mapping[str, SequenceStoreBase]) -> None:
        self._stores = dict(stores)

    def verify(self) -> ConsistencyReport:
        sizes = {name: len(store) for name, store in self._stores.items()}
        names = list(self._stores)

        # Walk the common prefix even when sizes differ: the first
        # differing offset is still the most useful thing to report.
        for offset, records in enumerate(zip(*self._stores.values())):
            first = records[0]
            for name, other in zip(names[1:], records[1:]):
                if first != other:
                    return ConsistencyReport(
                        is_consistent=False,
                        sizes=sizes,
                        first_mismatch=offset,
                        error_message=(
                            f"stores differ at offset {offset}: "
                            f"{names[0]} has {first!r}, {name} has {other!r}"
                        ),
                    )

        if len(set(sizes.values())) > 1:
            return ConsistencyReport(
                is_consistent=False,
                sizes=sizes,
                first_mismatch=min(sizes.values()),
                error_message=f"store sizes differ: {sizes}",
            )

        return ConsistencyReport(is_consistent=True, sizes=sizes)
