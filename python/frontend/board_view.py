"""Presentation-side mirror of the board, kept in sync purely by events.

Every frontend draws from a ``BoardView`` instead of reading the engine's
board directly, the same way a page only ever sees the cells the game
tells it to repaint.
"""

from __future__ import annotations

from enum import StrEnum

from backend.engine.gameplay import GamePlay
from backend.models.events import TileChange, Victory


class CellKind(StrEnum):
    VACANT = "vacant"
    PLAYER = "player"
    BLOCK = "block"
    MERGED = "merged"
    HIDDEN = "hidden"


class BoardView:
    def __init__(self, size: int) -> None:
        self.size = size
        self.labels: list[str] = [""] * (size * size)
        self.kinds: list[CellKind] = [CellKind.VACANT] * (size * size)
        self.victory: Victory | None = None
        self._widest = 1

    @classmethod
    def attach(cls, game: GamePlay) -> BoardView:
        """Create a view subscribed to *game*.  Call before ``game.start()``."""
        view = cls(game.size)
        game.subscribe(view.on_tile_change, view.on_victory)
        return view

    # -- event handlers -------------------------------------------------------

    def on_tile_change(self, change: TileChange) -> None:
        i = change.index
        if change.vacant or change.tile is None:
            self.labels[i] = ""
            self.kinds[i] = CellKind.VACANT
        elif change.tile.is_player:
            self.labels[i] = ""
            self.kinds[i] = CellKind.PLAYER
        else:
            self.labels[i] = change.tile.fragment
            self.kinds[i] = CellKind.BLOCK
            self._widest = max(self._widest, len(change.tile.fragment))

    def on_victory(self, victory: Victory) -> None:
        self.victory = victory
        self.labels[victory.anchor] = victory.phrase
        self.kinds[victory.anchor] = CellKind.MERGED
        for i in victory.hidden:
            self.labels[i] = ""
            self.kinds[i] = CellKind.HIDDEN

    # -- layout ---------------------------------------------------------------

    def span(self, index: int) -> int:
        if self.victory is not None and index == self.victory.anchor:
            return self.victory.span
        return 1

    def segments(self, row: int) -> list[tuple[int, int]]:
        """``(index, span)`` pairs to draw for *row*, skipping hidden cells."""
        start = row * self.size
        return [
            (i, self.span(i))
            for i in range(start, start + self.size)
            if self.kinds[i] is not CellKind.HIDDEN
        ]

    def cell_width(self) -> int:
        """Widest block label seen so far, at least one character."""
        return self._widest
