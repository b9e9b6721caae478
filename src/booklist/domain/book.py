"""Book: the reference record stored in a BookList.

The list itself only needs equality and a strict order from its
records. Book adds the text form used by booklist.serialization:

    "0-201-63361-2", "Design Patterns", "Gamma et al.", 54.99

Fields are compared in declaration order (ISBN first, then title,
author and price), which gives the total order the list compares by.
"""
from __future__ import annotations

import csv
from dataclasses import dataclass


def _quote(value: str) -> str:
    """Quote a field the way csv does: wrap in quotes, double any quote."""
    return '"' + value.replace('"', '""') + '"'


@dataclass(frozen=True, slots=True, order=True)
class Book:
    """Immutable book record.

    frozen=True makes a Book a plain value, so every store can hold the
    same instance without one store's edit leaking into another.
    order=True derives <, <=, >, >= from the field tuple.
    """
    isbn: str
    title: str = ""
    author: str = ""
    price: float = 0.0

    def __post_init__(self) -> None:
        for name in ("isbn", "title", "author"):
            if "\n" in getattr(self, name) or "\r" in getattr(self, name):
                raise ValueError(f"Book.{name} must be a single line")
        # Prices are written with two decimals; normalize now so a
        # written-then-read Book compares equal to the one it was written from.
        object.__setattr__(self, "price", round(float(self.price), 2))

    def __str__(self) -> str:
        return (
            f"{_quote(self.isbn)}, {_quote(self.title)}, "
            f"{_quote(self.author)}, {self.price:.2f}"
        )

    @classmethod
    def parse(cls, text: str) -> Book:
        """Inverse of str(): read one Book from its text form.

        Raises ValueError if the text does not hold exactly four fields
        or the price is not a number.
        """
        rows = list(csv.reader([text.strip()], skipinitialspace=True))
        if len(rows) != 1 or len(rows[0]) != 4:
            raise ValueError(f"Expected 4 comma-separated fields, got {text!r}")
        isbn, title, author, price = rows[0]
        try:
            amount = float(price)
        except ValueError:
            raise ValueError(f"Invalid price {price!r} in {text!r}") from None
        return cls(isbn=isbn, title=title, author=author, price=amount)
