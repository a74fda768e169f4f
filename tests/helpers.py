from __future__ import annotations

from collections import Counter
from typing import Any, List

from match3.board import Board
from match3.components.board_event import BoardEvent, MatchEvent, RefillEvent
from match3.components.match import Match
from match3.components.position import Position


class EventLog:
    """Board listener that records every event it receives."""

    def __init__(self, board: Board):
        self.events: List[BoardEvent] = []
        board.add_listener(self)

    def __call__(self, event: BoardEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[str]:
        return [event.kind for event in self.events]

    def matches(self) -> List[tuple]:
        """(matched, [(r,c), ...]) for each MatchEvent, in emission order."""
        return [
            (event.matched, [p.as_tuple() for p in event.positions])
            for event in self.events
            if isinstance(event, MatchEvent)
        ]


def match_event(matched: Any, *cells) -> MatchEvent:
    return MatchEvent(Match(matched=matched, positions=tuple(Position(r, c) for r, c in cells)))


def refill_event() -> RefillEvent:
    return RefillEvent()


class _Matched:
    def __init__(self, matched: List[Any]):
        self._matched = matched

    def with_pieces(self, *pieces: Any) -> None:
        assert Counter(pieces) == Counter(self._matched), f"wildcard cells held {sorted(self._matched)}"


class _Requirement:
    def __init__(self, board: Board):
        self.board = board

    def _tile(self, tiles, position: Position):
        return tiles[position.row * self.board.width + position.col]

    def to_equal(self, *tiles: Any) -> None:
        assert len(tiles) == self.board.width * self.board.height
        for p in self.board.positions():
            assert self.board.piece(p) == self._tile(tiles, p), f"unexpected piece at {p.as_tuple()}"

    def to_match(self, *tiles: Any) -> _Matched:
        """Like to_equal, but '*' cells accept anything and are collected for with_pieces."""
        assert len(tiles) == self.board.width * self.board.height
        matched: List[Any] = []
        for p in self.board.positions():
            expected = self._tile(tiles, p)
            if expected == '*':
                matched.append(self.board.piece(p))
            else:
                assert self.board.piece(p) == expected, f"unexpected piece at {p.as_tuple()}"
        return _Matched(matched)


def require(board: Board) -> _Requirement:
    return _Requirement(board)
