from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A (row, col) cell coordinate. Ordering is row-major."""

    row: int
    col: int

    @classmethod
    def of(cls, value: Any) -> Position:
        """Coerce a Position, an object or mapping with row/col, or a (row, col) pair."""
        if isinstance(value, Position):
            return value
        if isinstance(value, Mapping):
            return cls(value["row"], value["col"])
        if hasattr(value, 'row') and hasattr(value, 'col'):
            return cls(value.row, value.col)
        row, col = value
        return cls(row, col)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)
