"""Text stream format for a SynchronizedOrderedList.

Layout: the record count on its own line, then one line per record,
labelled with its zero-based index right-aligned in five columns:

    3
        0:  "0-13-110362-8", "The C Programming Language", "Kernighan", 48.00
        1:  "0-201-63361-2", "Design Patterns", "Gamma", 54.99
        2:  "0-262-03384-4", "Introduction to Algorithms", "Cormen", 89.50

Writing uses str() on each record. Reading discards each label up to
the first ':' and hands the rest of the line to `record_type.parse`.

Reads never modify a list in place: load() and loads() return a new
list, and load_into() builds a fresh list first and only swaps it into
the target once every line has parsed. A malformed stream therefore
leaves the target exactly as it was.
"""
from __future__ import annotations

import io
import logging
from typing import IO

from booklist.book_list import DEFAULT_CAPACITY, SynchronizedOrderedList
from booklist.domain.book import Book
from booklist.domain.position import Position
from booklist.domain.types import ParsableRecord
from booklist.errors import SerializationError

log = logging.getLogger(__name__)

# Column width of the right-aligned index label.
INDEX_WIDTH = 5


def dump(book_list: SynchronizedOrderedList, fp: IO[str]) -> None:
    """Write book_list to a text stream."""
    fp.write(dumps(book_list))


def dumps(book_list: SynchronizedOrderedList) -> str:
    """Return the text form of book_list."""
    records = list(book_list)
    lines = [str(len(records))]
    for index, record in enumerate(records):
        lines.append(f"{index:>{INDEX_WIDTH}}:  {record}")
    log.debug("Serialized %d records", len(records))
    return "\n".join(lines) + "\n"


def load(
    fp: IO[str],
    record_type: type[ParsableRecord] = Book,
    *,
    capacity: int = DEFAULT_CAPACITY,
) -> SynchronizedOrderedList:
    """Read a list from a text stream.

    Raises SerializationError if the stream is malformed, and
    CapacityExceededError if it holds more records than `capacity`.
    """
    result: SynchronizedOrderedList = SynchronizedOrderedList(capacity=capacity)
    count = _read_count(fp)
    for index in range(count):
        line = fp.readline()
        if not line:
            raise SerializationError(
                f"Stream ended after {index} of {count} records"
            )
        label, sep, text = line.partition(":")
        if not sep or not label.strip():
            raise SerializationError(
                f"Record line {index} has no index label: {line.rstrip()!r}"
            )
        try:
            record = record_type.parse(text.strip())
        except ValueError as exc:
            raise SerializationError(
                f"Cannot parse record line {index}: {exc}"
            ) from exc
        result.insert(record, Position.BOTTOM)

    log.debug("Read %d records (%d after de-duplication)", count, len(result))
    return result


def loads(
    text: str,
    record_type: type[ParsableRecord] = Book,
    *,
    capacity: int = DEFAULT_CAPACITY,
) -> SynchronizedOrderedList:
    """Read a list from a string. See load()."""
    return load(io.StringIO(text), record_type, capacity=capacity)


def load_into(
    fp: IO[str],
    target: SynchronizedOrderedList,
    record_type: type[ParsableRecord] = Book,
) -> SynchronizedOrderedList:
    """Replace target's contents with the list read from fp.

    The target must be consistent before it is replaced; a diverged
    target raises InvalidInternalStateError instead of being silently
    overwritten. The new list is built with target's capacity and
    swapped in only after the whole stream has been read, so any error
    leaves target untouched.
    """
    target.verify("load_into")
    fresh = load(fp, record_type, capacity=target.capacity)
    target.swap(fresh)
    return target


def _read_count(fp: IO[str]) -> int:
    """Read the leading record count, skipping blank lines."""
    line = fp.readline()
    while line and not line.strip():
        line = fp.readline()
    if not line:
        raise SerializationError("Stream is empty: expected a record count")
    try:
        count = int(line.strip())
    except ValueError:
        raise SerializationError(
            f"Expected a record count, got {line.strip()!r}"
        ) from None
    if count < 0:
        raise SerializationError(f"Record count must be non-negative, got {count}")
    return count
