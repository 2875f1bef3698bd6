"""Mutable bookkeeping for one session: board, phrase, moves, clock, outcome."""

from __future__ import annotations

import time

from backend.models.board import Board
from backend.models.events import Victory


class GameState:
    """The board being played plus everything a frontend shows beside it.

    The clock runs from construction until :meth:`pause`, which the
    session calls when it ends (including on victory).
    """

    def __init__(self, board: Board, phrase: str) -> None:
        self.board = board
        self.phrase = phrase
        self.moves: int = 0
        self.victory: Victory | None = None
        self._started_at: float = time.monotonic()
        self._stopped_at: float | None = None

    @property
    def elapsed_time(self) -> float:
        end = self._stopped_at if self._stopped_at is not None else time.monotonic()
        return end - self._started_at

    @property
    def clock_running(self) -> bool:
        return self._stopped_at is None

    def pause(self) -> None:
        if self._stopped_at is None:
            self._stopped_at = time.monotonic()

    def increment_moves(self) -> None:
        self.moves += 1

    def declare_victory(self, victory: Victory) -> None:
        self.victory = victory
        self.pause()

    @property
    def is_won(self) -> bool:
        return self.victory is not None
