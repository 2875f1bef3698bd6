"""Shared fixtures: small hand-made boards and an event recorder."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.events import TileChange, Victory
from backend.models.level import Level, RuleSet


class Recorder:
    """Collects every event a session emits."""

    def __init__(self) -> None:
        self.changes: list[TileChange] = []
        self.victories: list[Victory] = []

    def attach(self, game: GamePlay) -> "Recorder":
        game.subscribe(self.changes.append, self.victories.append)
        return self


def make_board(size: int, player: int, **blocks: int) -> Board:
    """``make_board(5, 12, ab=7)`` puts the player on 12 and block "ab" on 7."""
    return Board.from_layout(size, player, [(cell, text) for text, cell in blocks.items()])


def make_game(
    size: int,
    player: int,
    placements: list[tuple[int, str]],
    phrase: str,
    push_limit: int | None = 1,
) -> GamePlay:
    level = Level(size, player, tuple(placements), phrase, name="test")
    return GamePlay(level, RuleSet(push_limit=push_limit))


def positions(board: Board) -> dict[str, int]:
    return {tile.fragment: tile.position for tile in board.tiles if not tile.vacant}


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
