"""Win detection. Reads the row of blocks around a freshly moved block."""

from __future__ import annotations

import logging

from backend.models.board import Board
from backend.models.events import Victory
from backend.models.tiles import Block

logger = logging.getLogger(__name__)


class WinScanner:
    """Checks whether a block now sits inside a complete copy of the phrase.

    Starting at the block, fragments are read into an accumulator.  While
    the accumulated text is a prefix of the phrase the scan steps right;
    when it only matches somewhere inside the phrase the accumulator is
    dropped and the scan steps left, looking for the block that starts the
    phrase.  Anything that is not part of the phrase ends the scan.
    """

    def __init__(self, board: Board, phrase: str) -> None:
        if not phrase:
            raise ValueError("Cannot scan for an empty phrase.")
        self.board = board
        self.phrase = phrase

    def check_win(self, block: Block) -> Victory | None:
        suit = ""
        contributing: list[Block] = []
        seen: set[tuple[int, str]] = set()
        current = block

        while True:
            state = (current.position, suit)
            if state in seen:
                logger.debug("Scan from %r cycles at %s; giving up", block, state)
                return None
            seen.add(state)

            suit += current.fragment
            contributing.append(current)

            if suit == self.phrase:
                return self._victory(contributing)
            if suit not in self.phrase:
                logger.debug("Scan from %r stops at %r", block, suit)
                return None

            if self.phrase.startswith(suit):
                step = 1
            else:
                suit = ""
                contributing = []
                step = -1

            neighbour = current.position + step
            if not self.board.is_reachable(current.position, neighbour):
                return None
            match self.board.get(neighbour):
                case Block() as next_block:
                    current = next_block
                case _:
                    # vacant, or the player: its marker is never part of a phrase
                    return None

    def _victory(self, contributing: list[Block]) -> Victory:
        anchor = contributing[0].position
        span = len(contributing)
        return Victory(
            anchor=anchor,
            span=span,
            hidden=tuple(range(anchor + 1, anchor + span)),
            phrase=self.phrase,
            blocks=tuple(contributing),
        )
