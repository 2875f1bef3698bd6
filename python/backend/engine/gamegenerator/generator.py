"""Builds playable boards from level layouts."""

from __future__ import annotations

import logging
from collections import Counter

from backend.models.board import Board
from backend.models.level import Level

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = Level(
    size=10,
    player_start=33,
    placements=(
        (12, "toe"),
        (41, "mah"),
        (55, "@"),
        (17, "pro"),
        (25, "ton"),
        (58, "mail"),
        (38, "."),
        (53, "com"),
    ),
    phrase="toemah@protonmail.com",
    name="contact",
)


class GameGenerator:
    """Stateless factory; all methods are static."""

    @staticmethod
    def default_level() -> Level:
        return DEFAULT_LEVEL

    @staticmethod
    def build(level: Level) -> Board:
        """Return a fresh board laid out as *level* describes.

        Raises ``LayoutError`` if the layout breaks a board invariant.
        """
        board = Board.from_layout(level.size, level.player_start, level.placements)
        GameGenerator._check_phrase(level)
        logger.debug(
            "Built level %r: %d×%d, %d blocks",
            level.name,
            level.size,
            level.size,
            len(level.placements),
        )
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _check_phrase(level: Level) -> None:
        letters = Counter("".join(fragment for _, fragment in level.placements))
        missing = Counter(level.phrase) - letters
        if missing:
            logger.warning(
                "Level %r cannot spell %r: not enough of %s",
                level.name,
                level.phrase,
                "".join(sorted(missing)),
            )
