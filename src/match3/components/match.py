from dataclasses import dataclass
from typing import Any, Tuple

from match3.components.position import Position


@dataclass(frozen=True, slots=True)
class Match:
    """One maximal run of equal pieces in a single row or column.

    Positions are ordered by increasing column (horizontal runs) or
    increasing row (vertical runs). An L or T shaped cluster shows up as
    separate Match records that share the corner position.
    """
    matched: Any
    positions: Tuple[Position, ...]

