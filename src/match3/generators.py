from __future__ import annotations

import random
from collections import deque
from typing import Any, Iterable, Protocol, Sequence

from match3.constants import DEFAULT_PIECES
from match3.errors import GeneratorExhausted


class Generator(Protocol):
    """Supplies new pieces to a board, one per call."""

    def next(self) -> Any:
        ...


class CyclicGenerator:
    """Cycles through a fixed sequence of pieces forever."""

    def __init__(self, sequence: Sequence[Any]):
        if not sequence:
            raise ValueError("CyclicGenerator needs at least one piece")
        self._sequence = sequence
        self._index = 0

    def next(self) -> Any:
        piece = self._sequence[self._index]
        self._index = (self._index + 1) % len(self._sequence)
        return piece


class ScriptedGenerator:
    """Hands out a queue of pieces in order; more can be queued with prepare()."""

    def __init__(self, *upcoming: Any):
        self._upcoming: deque = deque(upcoming)

    def prepare(self, *pieces: Any) -> None:
        self._upcoming.extend(pieces)

    @property
    def remaining(self) -> int:
        return len(self._upcoming)

    def next(self) -> Any:
        if not self._upcoming:
            raise GeneratorExhausted("Empty queue")
        return self._upcoming.popleft()


class RandomGenerator:
    """Draws pieces uniformly from a palette."""

    def __init__(self, pieces: Iterable[Any] = DEFAULT_PIECES, *, rng: random.Random | None = None):
        self._choices = list(pieces)
        if not self._choices:
            raise ValueError("RandomGenerator needs at least one piece")
        self.random = rng or random.Random()

    def next(self) -> Any:
        return self.random.choice(self._choices)
