import pytest

from match3.board import Board
from match3.components.position import Position
from match3.errors import CascadeLimitExceeded
from match3.generators import ScriptedGenerator
from tests.helpers import EventLog, match_event, refill_event, require


@pytest.fixture
def generator():
    return ScriptedGenerator(
        'A', 'B', 'A',
        'D', 'B', 'C',
        'D', 'A', 'C',
        'C', 'D', 'D',
    )


@pytest.fixture
def board(generator):
    return Board(generator, 3, 4)


def test_registers_if_refilling_brings_new_matches(board, generator):
    log = EventLog(board)
    generator.prepare('B', 'C', 'C')
    generator.prepare('A', 'A', 'D')
    board.move(Position(0, 1), Position(2, 1))
    assert log.events == [
        match_event('A', (0, 0), (0, 1), (0, 2)),
        refill_event(),
        match_event('C', (0, 2), (1, 2), (2, 2)),
        refill_event(),
    ]


def test_iterates_until_there_are_no_new_matches(board, generator):
    log = EventLog(board)
    generator.prepare('B', 'C', 'C')
    generator.prepare('A', 'A', 'A')
    generator.prepare('A', 'A', 'D')
    board.move(Position(0, 1), Position(2, 1))
    assert log.events == [
        match_event('A', (0, 0), (0, 1), (0, 2)),
        refill_event(),
        match_event('C', (0, 2), (1, 2), (2, 2)),
        refill_event(),
        match_event('A', (0, 2), (1, 2), (2, 2)),
        refill_event(),
    ]
    require(board).to_equal(
        'B', 'C', 'A',
        'D', 'B', 'A',
        'D', 'B', 'D',
        'C', 'D', 'D',
    )
    assert board.matches() == []


def test_cascade_cap_is_reported_distinctly(generator):
    board = Board(generator, 3, 4, max_cascades=1)
    log = EventLog(board)
    generator.prepare('B', 'C', 'C')
    with pytest.raises(CascadeLimitExceeded) as excinfo:
        board.move(Position(0, 1), Position(2, 1))
    assert excinfo.value.passes == 1
    assert log.kinds() == ['Match', 'Refill']


def test_cascade_within_cap_settles_normally(generator):
    board = Board(generator, 3, 4, max_cascades=2)
    log = EventLog(board)
    generator.prepare('B', 'C', 'C')
    generator.prepare('A', 'A', 'D')
    board.move(Position(0, 1), Position(2, 1))
    assert log.kinds() == ['Match', 'Refill', 'Match', 'Refill']


def test_rejects_non_positive_cascade_cap(generator):
    with pytest.raises(ValueError):
        Board(generator, 3, 4, max_cascades=0)
