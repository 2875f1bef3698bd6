"""Board model for the phrase-push puzzle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from backend.models import grid
from backend.models.tiles import Block, Cell, Piece, Player, Tile


class LayoutError(ValueError):
    """Raised when a board or level breaks the layout invariants."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def offset(self, size: int) -> int:
        """Cell-index offset of one step in this direction."""
        return {
            Direction.UP: -size,
            Direction.DOWN: size,
            Direction.LEFT: -1,
            Direction.RIGHT: 1,
        }[self]


@dataclass
class Board:
    """Represents the puzzle board.

    Cells are stored as a flat row-major list of ``size * size`` entries.
    Vacant cells hold a :class:`Tile`; blocks and the player hold
    themselves and know their own index.
    """

    size: int
    tiles: list[Cell]

    def __post_init__(self) -> None:
        self._validate()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_layout(
        cls,
        size: int,
        player_start: int,
        placements: Iterable[tuple[int, str]],
    ) -> Board:
        """Create a board from a player cell and ``(cell, fragment)`` pairs.

        Example::

            Board.from_layout(3, 4, [(0, "ab"), (2, "c")])
        """
        if size <= 0:
            raise LayoutError(f"Board size must be positive, got {size}.")
        tiles: list[Cell] = [Tile() for _ in range(size * size)]
        pieces: list[Piece] = [Player(player_start)]
        pieces.extend(Block(cell, fragment) for cell, fragment in placements)
        for piece in pieces:
            if not grid.in_bounds(piece.position, size):
                raise LayoutError(
                    f"Cell {piece.position} is outside a {size}×{size} board."
                )
            if not tiles[piece.position].vacant:
                raise LayoutError(f"Cell {piece.position} is placed twice.")
            tiles[piece.position] = piece
        return cls(size=size, tiles=tiles)

    def _validate(self) -> None:
        if self.size <= 0:
            raise LayoutError(f"Board size must be positive, got {self.size}.")
        if len(self.tiles) != self.size * self.size:
            raise LayoutError(
                f"Expected {self.size * self.size} cells for a "
                f"{self.size}×{self.size} board, got {len(self.tiles)}."
            )
        players = 0
        for cell, tile in enumerate(self.tiles):
            match tile:
                case Player(position=position) | Block(position=position) if (
                    position != cell
                ):
                    raise LayoutError(
                        f"Piece at cell {cell} claims position {position}."
                    )
                case Player():
                    players += 1
                case Block(fragment=""):
                    raise LayoutError(f"Block at cell {cell} has no fragment.")
        if players != 1:
            raise LayoutError(f"Expected exactly one player, found {players}.")

    # -- queries --------------------------------------------------------------

    def get(self, cell: int) -> Cell:
        return self.tiles[cell]

    def set(self, cell: int, tile: Cell) -> None:
        self.tiles[cell] = tile

    def is_vacant(self, cell: int) -> bool:
        return self.tiles[cell].vacant

    def is_reachable(self, origin: int, target: int) -> bool:
        return grid.is_reachable(origin, target, self.size)

    @property
    def player(self) -> Player:
        for tile in self.tiles:
            if isinstance(tile, Player):
                return tile
        raise LayoutError("Board has no player.")

    def blocks(self) -> list[Block]:
        """All letter blocks in reading order."""
        return [tile for tile in self.tiles if isinstance(tile, Block)]

    def fragments(self) -> list[str]:
        """Per-cell fragment text, ``""`` for vacant cells."""
        return [tile.fragment for tile in self.tiles]

    def pretty(self) -> str:
        """Human-readable grid: ``·`` for vacant cells, ``P`` for the player."""
        width = max((len(b.fragment) for b in self.blocks()), default=1)
        lines: list[str] = []
        for r in range(self.size):
            row: list[str] = []
            for c in range(self.size):
                match self.get(grid.index(r, c, self.size)):
                    case Player():
                        label = "P"
                    case Block(fragment=fragment):
                        label = fragment
                    case _:
                        label = "·"
                row.append(f"{label:^{width}}")
            lines.append(" ".join(row))
        return "\n".join(lines)
