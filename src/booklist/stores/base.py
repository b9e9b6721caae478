"""Abstract base for sequence stores.

All four stores implement this interface. The point: the consistency
checker and the query surface can walk any of them the same way,
while each store keeps its own layout-specific mutation primitives.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class SequenceStoreBase(ABC, Generic[T]):
    """Read-only view shared by every store."""

    __slots__ = ()

    @abstractmethod
    def __len__(self) -> int:
        """Number of records currently held."""
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yield records from top (offset 0) to bottom."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every record."""
        ...

    @abstractmethod
    def copy(self) -> SequenceStoreBase[T]:
        """Independent store of the same kind holding copies of the records."""
        ...

    def snapshot(self) -> tuple[T, ...]:
        """Contents as an immutable tuple, top to bottom."""
        return tuple(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
