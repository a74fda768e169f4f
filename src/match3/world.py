import random
from typing import Any, Iterable, Optional, Tuple

from match3.board import Board
from match3.constants import DEFAULT_PIECES, GRID_COLS, GRID_ROWS, MAX_CASCADES
from match3.events.bus import EventBus
from match3.generators import Generator, RandomGenerator
from match3.systems.board import BoardSystem


def create_board(
    event_bus: EventBus,
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    generator: Optional[Generator] = None,
    pieces: Iterable[Any] = DEFAULT_PIECES,
    rng: Optional[random.Random] = None,
    max_cascades: Optional[int] = MAX_CASCADES,
) -> Tuple[Board, BoardSystem]:
    """Build a board and attach it to the event bus.

    Without an explicit generator, pieces are drawn at random from
    ``pieces`` using ``rng`` (seed it for reproducible boards).
    """
    if generator is None:
        generator = RandomGenerator(pieces, rng=rng)
    board = Board(generator, cols, rows, max_cascades=max_cascades)
    return board, BoardSystem(board, event_bus)
