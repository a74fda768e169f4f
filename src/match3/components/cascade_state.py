from dataclasses import dataclass


@dataclass(slots=True)
class CascadeState:
    """Tracks the resolution passes of the move currently being played."""

    active: bool = False
    depth: int = 0
