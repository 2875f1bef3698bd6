from backend.models.board import Board, Direction, LayoutError
from backend.models.events import TileChange, Victory
from backend.models.level import Level, RuleSet
from backend.models.tiles import PLAYER_MARKER, Block, Player, Tile

__all__ = [
    "Board",
    "Block",
    "Direction",
    "LayoutError",
    "Level",
    "PLAYER_MARKER",
    "Player",
    "RuleSet",
    "Tile",
    "TileChange",
    "Victory",
]
