"""Push resolution: moves a piece and whatever chain of blocks it shoves."""

from __future__ import annotations

import logging

from backend.models.board import Board
from backend.models.events import TileChange, TileListener
from backend.models.level import RuleSet
from backend.models.tiles import Block, Piece, Player, Tile

logger = logging.getLogger(__name__)


class MovementResolver:
    """Applies single-step moves to a board, all-or-nothing.

    A move walks ahead of the mover collecting every piece it would have to
    push.  If the walk ends on a vacant cell the whole chain shifts one
    step, farthest piece first; if it runs off the board (or past the
    rule set's push limit) nothing moves at all.  Under the default limit
    of one block, a block backed by another block cannot be pushed.
    """

    def __init__(
        self,
        board: Board,
        rules: RuleSet | None = None,
        on_change: TileListener | None = None,
    ) -> None:
        self.board = board
        self.rules = rules or RuleSet()
        self._on_change = on_change

    def push_chain(self, mover: Piece, offset: int) -> list[Piece] | None:
        """Return the pieces that would shift, mover first, or ``None`` if blocked."""
        chain: list[Piece] = [mover]
        limit = self.rules.push_limit
        current = mover
        while True:
            target = current.position + offset
            if not self.board.is_reachable(current.position, target):
                return None
            match self.board.get(target):
                case Tile():
                    return chain
                case Block() | Player() as ahead:
                    if limit is not None and len(chain) > limit:
                        return None
                    chain.append(ahead)
                    current = ahead
                case other:
                    raise TypeError(f"Unexpected cell content {other!r}.")

    def attempt_move(self, mover: Piece, offset: int) -> list[Piece]:
        """Move *mover* by *offset*, pushing anything in the way.

        Returns the pieces that moved, farthest first; an empty list means
        the move was rejected and the board is untouched.
        """
        if self.board.get(mover.position) is not mover:
            raise ValueError(f"{mover!r} is not on the board at {mover.position}.")

        chain = self.push_chain(mover, offset)
        if chain is None:
            logger.debug("Move of %r by %+d is blocked", mover, offset)
            return []

        moved = list(reversed(chain))
        for piece in moved:
            self._shift(piece, piece.position + offset)
        return moved

    # -- helpers --------------------------------------------------------------

    def _shift(self, piece: Piece, target: int) -> None:
        origin = piece.position
        self.board.set(origin, Tile())
        piece.position = target
        self.board.set(target, piece)
        self._emit(TileChange(origin, vacant=True))
        self._emit(TileChange(target, vacant=False, tile=piece))

    def _emit(self, change: TileChange) -> None:
        if self._on_change is not None:
            self._on_change(change)
