"""Cell variants: vacant tiles, letter blocks and the player token.

Every variant answers the same small capability set (``fragment``,
``has_position``, ``is_player``, ``vacant``); callers pick the variant
with ``match`` rather than type checks.
"""

from __future__ import annotations

from dataclasses import dataclass

PLAYER_MARKER = "player-tile"


@dataclass
class Tile:
    """An empty cell."""

    fragment: str = ""

    has_position = False
    is_player = False
    vacant = True


@dataclass(eq=False)
class Block:
    """A pushable block carrying a piece of the target phrase."""

    position: int
    fragment: str

    has_position = True
    is_player = False
    vacant = False


@dataclass(eq=False)
class Player:
    """The token moved by the player's commands."""

    position: int
    fragment: str = PLAYER_MARKER

    has_position = True
    is_player = True
    vacant = False


Piece = Block | Player
Cell = Tile | Block | Player
