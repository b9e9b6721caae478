"""SynchronizedOrderedList: one ordered list kept in four containers at once.

The list owns four stores that always hold the same sequence:

    _fixed    FixedArrayStore    bounded slots, shift by hand
    _dynamic  DynamicArrayStore  Python list, native insert/del
    _singly   SinglyLinkedStore  edit through the predecessor node
    _doubly   DoublyLinkedStore  edit at the node itself

Every mutator (insert, remove, move_to_top) checks its input first,
then applies the same edit to each store in turn using that store's own
primitives, then re-verifies that the four still agree. Every query
verifies before it reads, and reads from the dynamic array.

The stores are never handed out for mutation. Copying and swapping
always move all four together, so the list behaves as one value.

Records are de-duplicated by equality: inserting a record that is
already present does nothing. The fixed array's capacity bounds the
whole list.
"""
from __future__ import annotations

import copy as copy_module
import logging
from typing import Any, Generic, Iterable, Iterator

from booklist.consistency import ConsistencyVerifier, containers_are_consistent
from booklist.domain.position import Position
from booklist.domain.types import Offset, R
from booklist.errors import (
    CapacityExceededError,
    InvalidInternalStateError,
    InvalidOffsetError,
)
from booklist.stores import (
    DoublyLinkedStore,
    DynamicArrayStore,
    FixedArrayStore,
    SequenceStoreBase,
    SinglyLinkedStore,
)

log = logging.getLogger(__name__)

# Slots in the fixed-capacity array, and so the most records a list can hold.
DEFAULT_CAPACITY = 11


class SynchronizedOrderedList(Generic[R]):
    """De-duplicated ordered list mirrored across four container stores.

    Offsets are zero-based from the top. find() reports a miss as
    size(), never as -1 or None, and remove() treats any offset that
    is not a valid position as a no-op.
    """

    __slots__ = ("_fixed", "_dynamic", "_singly", "_doubly")

    # Mutable value: equality is defined, hashing is not.
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        records: Iterable[R] = (),
        *,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._fixed: FixedArrayStore[R] = FixedArrayStore(capacity)
        self._dynamic: DynamicArrayStore[R] = DynamicArrayStore()
        self._singly: SinglyLinkedStore[R] = SinglyLinkedStore()
        self._doubly: DoublyLinkedStore[R] = DoublyLinkedStore()

        for record in records:
            self.insert(record, Position.BOTTOM)
        self.verify("constructor")

    # ---- consistency -----------------------------------------------------

    def _named_stores(self) -> dict[str, SequenceStoreBase[R]]:
        return {
            "fixed_array": self._fixed,
            "dynamic_array": self._dynamic,
            "singly_linked": self._singly,
            "doubly_linked": self._doubly,
        }

    def containers_are_consistent(self) -> bool:
        """True iff all four stores hold the same records in the same order."""
        return containers_are_consistent(
            self._fixed, self._dynamic, self._singly, self._doubly
        )

    def verify(self, where: str) -> None:
        """Raise InvalidInternalStateError unless the stores agree.

        `where` names the calling operation in the error and the log.
        """
        if self.containers_are_consistent():
            return
        report = ConsistencyVerifier(self._named_stores()).verify()
        log.error("Container consistency error in %s: %s", where, report.error_message)
        raise InvalidInternalStateError(
            f"Container consistency error in {where}", report
        )

    # ---- queries ---------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._fixed.capacity

    def size(self) -> int:
        """Number of records, after confirming the stores agree."""
        self.verify("size")
        return len(self._dynamic)

    def find(self, record: R) -> Offset:
        """Offset of the first record equal to `record`, or size() if absent."""
        self.verify("find")
        for offset, candidate in enumerate(self._dynamic):
            if candidate == record:
                return offset
        return len(self._dynamic)

    def stores(self) -> dict[str, tuple[R, ...]]:
        """Read-only snapshot of every store's contents, keyed by store name."""
        self.verify("stores")
        return {name: store.snapshot() for name, store in self._named_stores().items()}

    # ---- mutation --------------------------------------------------------

    def insert(self, record: R, position: Offset | Position = Position.BOTTOM) -> SynchronizedOrderedList[R]:
        """Insert record before the one currently at `position`.

        `position` is either an offset in [0, size()] (size() appends)
        or Position.TOP / Position.BOTTOM.

        Raises InvalidOffsetError for an offset outside [0, size()] and
        CapacityExceededError when the fixed array is full. Both are
        raised before any store changes. Inserting a record that is
        already present is a no-op.
        """
        if isinstance(position, Position):
            offset = 0 if position.is_top() else self.size()
        else:
            offset = position

        size = self.size()
        if offset < 0 or offset > size:
            raise InvalidOffsetError(offset, size)

        # Prevent duplicate entries
        if self.find(record) != size:
            log.debug("Skipping duplicate insert of %r", record)
            return self

        # Capacity is checked before any store is touched, so a failed
        # insert leaves all four exactly as they were.
        if self._fixed.is_full():
            raise CapacityExceededError(self._fixed.capacity)

        # Each store gets its own copy of the record, so changing the
        # caller's object afterwards cannot reach into the list.

        # Fixed array: open a hole at offset, then fill it
        self._fixed.shift_right(offset)
        self._fixed[offset] = copy_module.copy(record)

        # Dynamic array: native positional insert
        self._dynamic.insert(offset, copy_module.copy(record))

        # Singly-linked: the predecessor is `offset` steps past the sentinel
        predecessor = self._singly.advance(self._singly.before_begin(), offset)
        self._singly.insert_after(predecessor, copy_module.copy(record))

        # Doubly-linked: splice in front of the node now at offset
        self._doubly.insert_before(self._doubly.node_at(offset), copy_module.copy(record))

        log.debug("Inserted %r at offset %d", record, offset)
        self.verify("insert")
        return self

    def remove(self, offset: Offset) -> SynchronizedOrderedList[R]:
        """Remove the record at offset. Out-of-range offsets are a no-op."""
        if not 0 <= offset < self.size():
            log.debug("Ignoring remove at offset %d (size %d)", offset, len(self._dynamic))
            return self

        # Fixed array: close the hole by shifting the tail left
        self._fixed.shift_left(offset)

        # Dynamic array: native erase
        self._dynamic.erase(offset)

        # Singly-linked: unlink through the predecessor
        predecessor = self._singly.advance(self._singly.before_begin(), offset)
        self._singly.erase_after(predecessor)

        # Doubly-linked: unlink the node itself
        self._doubly.erase(self._doubly.node_at(offset))

        log.debug("Removed record at offset %d", offset)
        self.verify("remove")
        return self

    def remove_record(self, record: R) -> SynchronizedOrderedList[R]:
        """Remove the record equal to `record`, if there is one.

        A miss is a no-op: find() returns size(), which remove() ignores.
        """
        return self.remove(self.find(record))

    def move_to_top(self, record: R) -> SynchronizedOrderedList[R]:
        """Move an existing record to offset 0. Absent records are a no-op."""
        offset = self.find(record)
        if offset != self.size():
            self.remove(offset)
            self.insert(record, Position.TOP)
            log.debug("Moved %r from offset %d to the top", record, offset)

        self.verify("move_to_top")
        return self

    def extend(self, records: Iterable[R]) -> SynchronizedOrderedList[R]:
        """Append records one at a time at the bottom.

        Duplicates are skipped as with insert(); CapacityExceededError
        stops the extension at the first record that does not fit.
        """
        for record in list(records):
            self.insert(record, Position.BOTTOM)

        self.verify("extend")
        return self

    def __iadd__(self, records: Iterable[R]) -> SynchronizedOrderedList[R]:
        return self.extend(records)

    def clear(self) -> SynchronizedOrderedList[R]:
        for store in self._named_stores().values():
            store.clear()
        self.verify("clear")
        return self

    # ---- copy / assign / swap --------------------------------------------

    def copy(self) -> SynchronizedOrderedList[R]:
        """Store-wise copy. The copy shares no nodes or buffers with self."""
        self.verify("copy")
        other = type(self).__new__(type(self))
        other._fixed = self._fixed.copy()
        other._dynamic = self._dynamic.copy()
        other._singly = self._singly.copy()
        other._doubly = self._doubly.copy()
        return other

    def __copy__(self) -> SynchronizedOrderedList[R]:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> SynchronizedOrderedList[R]:
        return type(self)(
            (copy_module.deepcopy(record, memo) for record in self),
            capacity=self.capacity,
        )

    def assign(self, other: SynchronizedOrderedList[R]) -> SynchronizedOrderedList[R]:
        """Replace this list's contents with a copy of other's."""
        if other is not self:
            self.swap(other.copy())
        return self

    def swap(self, other: SynchronizedOrderedList[R]) -> None:
        """Exchange all four stores (capacity included) with other.

        Never raises and never inspects the records, so it is safe to
        build bulk replacement on top of it.
        """
        if other is self:
            return
        self._fixed, other._fixed = other._fixed, self._fixed
        self._dynamic, other._dynamic = other._dynamic, self._dynamic
        self._singly, other._singly = other._singly, self._singly
        self._doubly, other._doubly = other._doubly, self._doubly
        log.debug("Swapped list contents")

    # ---- comparison ------------------------------------------------------

    def compare(self, other: SynchronizedOrderedList[R]) -> int:
        """Three-way compare: -1, 0 or 1.

        The shorter list sorts first. Lists of equal length compare
        record by record using the records' own ordering, stopping at
        the first difference.
        """
        self.verify("compare")
        other.verify("compare")

        mine, theirs = len(self._dynamic), len(other._dynamic)
        if mine != theirs:
            return -1 if mine < theirs else 1

        for a, b in zip(self._dynamic, other._dynamic):
            if a < b:
                return -1
            if b < a:
                return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SynchronizedOrderedList):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SynchronizedOrderedList):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SynchronizedOrderedList):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SynchronizedOrderedList):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SynchronizedOrderedList):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SynchronizedOrderedList):
            return NotImplemented
        return self.compare(other) >= 0

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0

    def __iter__(self) -> Iterator[R]:
        self.verify("iter")
        return iter(self._dynamic.snapshot())

    def __contains__(self, record: object) -> bool:
        return self.find(record) != self.size()  # type: ignore[arg-type]

    def __getitem__(self, offset: Offset) -> R:
        self.verify("getitem")
        if not isinstance(offset, int):
            raise TypeError(
                f"list offsets must be integers, not {type(offset).__name__}"
            )
        return self._dynamic[offset]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({list(self._dynamic)!r}, "
            f"capacity={self._fixed.capacity})"
        )


# The list was built around books; keep the domain name available.
BookList = SynchronizedOrderedList
