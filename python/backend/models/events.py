"""Notifications the engine sends to whoever renders the board."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from backend.models.tiles import Block, Piece


@dataclass(frozen=True)
class TileChange:
    """A cell's occupant changed.  ``tile`` is ``None`` when it became vacant."""

    index: int
    vacant: bool
    tile: Piece | None = None


@dataclass(frozen=True)
class Victory:
    """The phrase has been assembled.

    The blocks in ``anchor .. anchor + span - 1`` merge into one cell
    anchored at ``anchor``; the remaining ``hidden`` cells stop being drawn.
    """

    anchor: int
    span: int
    hidden: tuple[int, ...]
    phrase: str
    blocks: tuple[Block, ...]


TileListener = Callable[[TileChange], None]
VictoryListener = Callable[[Victory], None]
