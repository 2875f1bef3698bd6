"""Core gameplay logic. Processes moves, checks the win condition and
notifies whoever is drawing the board."""

from __future__ import annotations

import logging
from collections.abc import Callable

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.engine.movement import MovementResolver
from backend.engine.winscanner import WinScanner
from backend.models.board import Board, Direction
from backend.models.events import (
    TileChange,
    TileListener,
    Victory,
    VictoryListener,
)
from backend.models.level import Level, RuleSet
from backend.models.tiles import Block, Piece

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    Commands are only accepted between :meth:`start` and :meth:`end`;
    assembling the phrase ends the session for good.  The session can be
    used as a context manager to pair the two.
    """

    def __init__(self, level: Level | None = None, rules: RuleSet | None = None) -> None:
        self.level = level or GameGenerator.default_level()
        board = GameGenerator.build(self.level)
        self._setup(board, self.level.phrase, rules)

    @classmethod
    def from_board(
        cls, board: Board, phrase: str, rules: RuleSet | None = None
    ) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.level = None
        obj._setup(board, phrase, rules)
        return obj

    def _setup(self, board: Board, phrase: str, rules: RuleSet | None) -> None:
        self.rules = rules or RuleSet()
        self.state = GameState(board, phrase)
        self._resolver = MovementResolver(board, self.rules, self._emit_tile_change)
        self._scanner = WinScanner(board, phrase)
        self._tile_listeners: list[TileListener] = []
        self._victory_listeners: list[VictoryListener] = []
        self._attached = False
        self._ended = False

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Attach command input and draw every cell once."""
        if self._ended:
            raise RuntimeError("This session has ended; start a new one.")
        if self._attached:
            return
        self._attached = True
        logger.info("Session started (%d×%d)", self.size, self.size)
        for index, tile in enumerate(self.state.board.tiles):
            if tile.vacant:
                self._emit_tile_change(TileChange(index, vacant=True))
            else:
                self._emit_tile_change(TileChange(index, vacant=False, tile=tile))

    def end(self) -> None:
        """Detach command input.  Safe to call any number of times."""
        if self._ended:
            return
        self._attached = False
        self._ended = True
        self.state.pause()
        logger.info("Session ended after %d moves", self.state.moves)

    def __enter__(self) -> "GamePlay":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.end()

    # -- observers ------------------------------------------------------------

    def subscribe(
        self,
        on_tile_change: TileListener | None = None,
        on_victory: VictoryListener | None = None,
    ) -> Callable[[], None]:
        """Register render callbacks.  Returns a function that removes them."""
        if on_tile_change is not None:
            self._tile_listeners.append(on_tile_change)
        if on_victory is not None:
            self._victory_listeners.append(on_victory)

        def unsubscribe() -> None:
            if on_tile_change in self._tile_listeners:
                self._tile_listeners.remove(on_tile_change)
            if on_victory in self._victory_listeners:
                self._victory_listeners.remove(on_victory)

        return unsubscribe

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Move the player one cell in *direction*, pushing blocks ahead.

        Returns True if anything moved.  Ignored unless the session is
        started and not yet won.
        """
        if not self._attached:
            return False
        moved = self._resolve(self.state.board.player, direction.offset(self.size))
        if not moved:
            return False
        self.state.increment_moves()
        self._scan(moved)
        return True

    def attempt_move(self, mover: Piece, offset: int) -> bool:
        """Resolve one step of *mover* by *offset* and check for a win.

        Every block that moved is scanned, farthest first, once the whole
        chain has settled.  The player's own step never triggers a scan.
        Usable before :meth:`start` to drive a session headlessly; a no-op
        once the session has ended or been won.
        """
        moved = self._resolve(mover, offset)
        if not moved:
            return False
        self._scan(moved)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def is_won(self) -> bool:
        return self.state.is_won

    @property
    def accepting_input(self) -> bool:
        return self._attached

    # -- helpers --------------------------------------------------------------

    def _resolve(self, mover: Piece, offset: int) -> list[Piece]:
        if self._ended or self.state.is_won:
            return []
        return self._resolver.attempt_move(mover, offset)

    def _scan(self, moved: list[Piece]) -> None:
        for piece in moved:
            match piece:
                case Block():
                    victory = self._scanner.check_win(piece)
                    if victory is not None:
                        self._declare_victory(victory)
                        return

    def _declare_victory(self, victory: Victory) -> None:
        self.state.declare_victory(victory)
        logger.info(
            "Phrase %r assembled at cell %d after %d moves",
            victory.phrase,
            victory.anchor,
            self.state.moves,
        )
        self.end()
        for listener in list(self._victory_listeners):
            listener(victory)

    def _emit_tile_change(self, change: TileChange) -> None:
        for listener in list(self._tile_listeners):
            listener(change)
