"""Level layout and engine rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    """Initial layout of a puzzle: where everything starts, and the goal."""

    size: int
    player_start: int
    placements: tuple[tuple[int, str], ...]
    phrase: str
    name: str = "untitled"

    def __post_init__(self) -> None:
        if not self.phrase:
            raise ValueError("A level needs a non-empty target phrase.")


@dataclass(frozen=True)
class RuleSet:
    """Rules governing move resolution.

    ``push_limit`` caps how many blocks a single move may shove.  The
    default ``1`` only pushes a lone block into free space, so a block
    with another block behind it does not move.  ``None`` lets any chain
    move as long as it has room; ``0`` forbids pushing.
    """

    push_limit: int | None = 1

    def __post_init__(self) -> None:
        if self.push_limit is not None and self.push_limit < 0:
            raise ValueError(
                f"push_limit must be zero or more, got {self.push_limit}."
            )
