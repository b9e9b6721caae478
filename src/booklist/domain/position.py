"""Symbolic insert positions."""
from enum import Enum, auto


class Position(Enum):
    TOP = auto()
    BOTTOM = auto()

    def is_top(self) -> bool:
        """Returns True only for TOP."""
        return self is Position.TOP
