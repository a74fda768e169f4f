from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, MutableSequence, Sequence, Set, Tuple

from match3.components.cell import EMPTY
from match3.components.position import Position

Grid = List[List[Any]]


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    piece: Any


def in_bounds(grid: Sequence[Sequence[Any]], position: Position) -> bool:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return 0 <= position.row < rows and 0 <= position.col < cols


def copy_grid(grid: Sequence[Sequence[Any]]) -> Grid:
    return [list(row) for row in grid]


def swap_cells(grid: Sequence[MutableSequence[Any]], a: Position, b: Position) -> None:
    grid[a.row][a.col], grid[b.row][b.col] = grid[b.row][b.col], grid[a.row][a.col]


def clear_positions(grid: Sequence[MutableSequence[Any]], positions: Iterable[Position]) -> Set[Position]:
    """Mark positions empty. Positions listed more than once are cleared once."""
    cleared: Set[Position] = set()
    for position in positions:
        if position in cleared:
            continue
        grid[position.row][position.col] = EMPTY
        cleared.add(position)
    return cleared


def compute_gravity_moves(grid: Sequence[Sequence[Any]]) -> List[GravityMove]:
    """Work out where surviving pieces land once gaps below them close.

    Columns are handled independently. Moves within a column are listed
    bottom-up, which is the order apply_gravity_moves relies on.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    moves: List[GravityMove] = []
    for col in range(cols):
        target_row = rows - 1
        for row in range(rows - 1, -1, -1):
            piece = grid[row][col]
            if piece is EMPTY:
                continue
            if row != target_row:
                moves.append(GravityMove(source=Position(row, col), target=Position(target_row, col), piece=piece))
            target_row -= 1
    return moves


def apply_gravity_moves(grid: Sequence[MutableSequence[Any]], moves: Iterable[GravityMove]) -> None:
    for move in moves:
        grid[move.target.row][move.target.col] = move.piece
        grid[move.source.row][move.source.col] = EMPTY


def compact(grid: Sequence[MutableSequence[Any]]) -> List[GravityMove]:
    moves = compute_gravity_moves(grid)
    apply_gravity_moves(grid, moves)
    return moves


def refill_empty_cells(grid: Sequence[MutableSequence[Any]], generator) -> List[Position]:
    """Fill empty cells from the generator, column by column, top to bottom."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    spawned: List[Position] = []
    for col in range(cols):
        for row in range(rows):
            if grid[row][col] is not EMPTY:
                continue
            grid[row][col] = generator.next()
            spawned.append(Position(row, col))
    return spawned


def find_valid_swaps(board) -> List[Tuple[Position, Position]]:
    """Enumerate adjacent swaps that would produce a match."""
    swaps: List[Tuple[Position, Position]] = []
    for pos in board.positions():
        right = Position(pos.row, pos.col + 1)
        if pos.col + 1 < board.width and board.can_move(pos, right):
            swaps.append((pos, right))
        down = Position(pos.row + 1, pos.col)
        if pos.row + 1 < board.height and board.can_move(pos, down):
            swaps.append((pos, down))
    return swaps
