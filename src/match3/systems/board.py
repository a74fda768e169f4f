from match3.board import Board
from match3.components.board_event import BoardEvent, MatchEvent, RefillEvent
from match3.components.cascade_state import CascadeState
from match3.events.bus import (EventBus, EVENT_TILE_SWAP_REQUEST, EVENT_TILE_SWAP_VALID,
                               EVENT_TILE_SWAP_INVALID, EVENT_MATCH_FOUND, EVENT_REFILL_COMPLETED,
                               EVENT_CASCADE_COMPLETE)


class BoardSystem:
    """Drives a Board from swap requests on the event bus and republishes its events."""

    def __init__(self, board: Board, event_bus: EventBus):
        self.board = board
        self.event_bus = event_bus
        self.state = CascadeState()
        self.board.add_listener(self.on_board_event)
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        if not self.board.can_move(src, dst):
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst)
            return
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        self.state.active = True
        self.state.depth = 0
        try:
            self.board.move(src, dst)
        finally:
            self.state.active = False
        self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=self.state.depth)

    def on_board_event(self, event: BoardEvent):
        if isinstance(event, MatchEvent):
            positions = [p.as_tuple() for p in event.positions]
            self.event_bus.emit(
                EVENT_MATCH_FOUND,
                matched=event.matched,
                positions=positions,
                size=len(positions),
                depth=self.state.depth + 1,
            )
        elif isinstance(event, RefillEvent):
            self.state.depth += 1
            self.event_bus.emit(EVENT_REFILL_COMPLETED, depth=self.state.depth)

