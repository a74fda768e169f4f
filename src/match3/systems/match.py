from typing import Any, List, Sequence

from match3.components.cell import EMPTY
from match3.components.match import Match
from match3.components.position import Position
from match3.constants import MIN_MATCH_LENGTH

Grid = Sequence[Sequence[Any]]


def _close_run(run: List[Position], value: Any, matches: List[Match], min_length: int) -> None:
    if value is not EMPTY and len(run) >= min_length:
        matches.append(Match(matched=value, positions=tuple(run)))


def find_matches(grid: Grid, *, min_length: int = MIN_MATCH_LENGTH) -> List[Match]:
    """Detect every maximal horizontal and vertical run of equal pieces.

    Horizontal runs come first in row-major scan order, then vertical runs
    in column-major order. Cells belonging to both a horizontal and a
    vertical run are reported in both matches. Empty cells never take part
    in a run.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    matches: List[Match] = []
    # Horizontal runs
    for r in range(rows):
        run: List[Position] = []
        last = EMPTY
        for c in range(cols):
            value = grid[r][c]
            if last is not EMPTY and value is not EMPTY and value == last:
                run.append(Position(r, c))
                continue
            _close_run(run, last, matches, min_length)
            run = [Position(r, c)]
            last = value
        _close_run(run, last, matches, min_length)
    # Vertical runs
    for c in range(cols):
        run = []
        last = EMPTY
        for r in range(rows):
            value = grid[r][c]
            if last is not EMPTY and value is not EMPTY and value == last:
                run.append(Position(r, c))
                continue
            _close_run(run, last, matches, min_length)
            run = [Position(r, c)]
            last = value
        _close_run(run, last, matches, min_length)
    return matches


def has_match(grid: Grid, *, min_length: int = MIN_MATCH_LENGTH) -> bool:
    return bool(find_matches(grid, min_length=min_length))
