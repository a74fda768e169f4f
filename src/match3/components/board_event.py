from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from match3.components.match import Match
from match3.components.position import Position


@dataclass(frozen=True, slots=True)
class MatchEvent:
    """A run detected during one resolution pass."""
    kind: ClassVar[str] = 'Match'
    match: Match

    @property
    def matched(self) -> Any:
        return self.match.matched

    @property
    def positions(self) -> Tuple[Position, ...]:
        return self.match.positions


@dataclass(frozen=True, slots=True)
class RefillEvent:
    """Every match of the pass has been cleared, compacted and refilled."""
    kind: ClassVar[str] = 'Refill'


BoardEvent = Union[MatchEvent, RefillEvent]
