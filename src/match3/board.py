from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Tuple

from match3.components.board_event import BoardEvent, MatchEvent, RefillEvent
from match3.components.match import Match
from match3.components.position import Position
from match3.constants import MAX_CASCADES
from match3.errors import CascadeLimitExceeded
from match3.generators import Generator
from match3.systems.board_ops import (
    clear_positions,
    compact,
    copy_grid,
    in_bounds,
    refill_empty_cells,
    swap_cells,
)
from match3.systems.match import find_matches, has_match

logger = logging.getLogger(__name__)

BoardListener = Callable[[BoardEvent], None]


class Board:
    """Match-three grid that resolves swaps into cascades of domain events.

    The board owns a fixed ``height x width`` grid filled from an injected
    generator. ``move`` swaps two cells, then repeatedly clears matches,
    lets the remaining pieces fall, refills from the generator and checks
    again until nothing matches. Listeners receive one ``MatchEvent`` per
    run found in a pass followed by a single ``RefillEvent``.
    """

    def __init__(
        self,
        generator: Generator,
        width: int,
        height: int,
        *,
        max_cascades: Optional[int] = MAX_CASCADES,
    ):
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Board {name} must be a positive integer, got {value!r}")
        if max_cascades is not None and max_cascades <= 0:
            raise ValueError(f"max_cascades must be positive or None, got {max_cascades!r}")
        self._width = width
        self._height = height
        self._generator = generator
        self._listeners: List[BoardListener] = []
        self.max_cascades = max_cascades
        # Row-major fill order is part of the contract with scripted generators.
        self._grid: List[List[Any]] = [[generator.next() for _ in range(width)] for _ in range(height)]
        logger.debug("Created %dx%d board", width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def add_listener(self, listener: BoardListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: BoardListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def positions(self) -> List[Position]:
        return [Position(row, col) for row in range(self._height) for col in range(self._width)]

    def in_bounds(self, position: Any) -> bool:
        try:
            p = Position.of(position)
        except (TypeError, ValueError, KeyError):
            return False
        for coord in (p.row, p.col):
            if isinstance(coord, bool) or not isinstance(coord, int):
                return False
        return in_bounds(self._grid, p)

    def piece(self, position: Any) -> Optional[Any]:
        """Return the piece at position, or None outside the board."""
        if not self.in_bounds(position):
            return None
        p = Position.of(position)
        return self._grid[p.row][p.col]

    def matches(self) -> List[Match]:
        return find_matches(self._grid)

    def snapshot(self) -> Tuple[Tuple[Any, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    def can_move(self, first: Any, second: Any) -> bool:
        """Return True if swapping first and second would create a match anywhere.

        The two cells must be on the board, distinct, and share exactly one
        coordinate. They need not be adjacent. The live grid is never touched.
        """
        if not (self.in_bounds(first) and self.in_bounds(second)):
            return False
        a = Position.of(first)
        b = Position.of(second)
        if a == b:
            return False
        if a.row != b.row and a.col != b.col:
            return False
        scratch = copy_grid(self._grid)
        swap_cells(scratch, a, b)
        return has_match(scratch)

    def move(self, first: Any, second: Any) -> None:
        if not self.can_move(first, second):
            logger.debug("Rejected move %r -> %r", first, second)
            return
        a = Position.of(first)
        b = Position.of(second)
        swap_cells(self._grid, a, b)
        logger.debug("Swapped %s and %s", a, b)
        self._resolve()

    def _resolve(self) -> None:
        passes = 0
        while True:
            matches = find_matches(self._grid)
            if not matches:
                logger.debug("Board settled after %d pass(es)", passes)
                return
            if self.max_cascades is not None and passes >= self.max_cascades:
                logger.warning("Cascade cap of %d passes reached", self.max_cascades)
                raise CascadeLimitExceeded(passes)
            passes += 1
            logger.debug("Pass %d: %d match(es)", passes, len(matches))
            for match in matches:
                self._emit(MatchEvent(match))
            clear_positions(self._grid, (p for match in matches for p in match.positions))
            compact(self._grid)
            refill_empty_cells(self._grid, self._generator)
            self._emit(RefillEvent())

    def _emit(self, event: BoardEvent) -> None:
        # Listeners may unsubscribe while an event is being delivered.
        for listener in list(self._listeners):
            listener(event)
