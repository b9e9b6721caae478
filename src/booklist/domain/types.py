"""Shared type aliases and the record protocols the list relies on."""
from __future__ import annotations

from typing import Any, Protocol, TypeAlias, TypeVar

Offset: TypeAlias = int  # zero-based position from the top of the list


class Record(Protocol):
    """What the list needs from a record: equality and a strict order."""

    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


class ParsableRecord(Record, Protocol):
    """A record that can also be read back from its own str() form."""

    @classmethod
    def parse(cls, text: str) -> ParsableRecord: ...


R = TypeVar("R", bound=Record)
