"""Flat-index arithmetic for the square board.

Cells are numbered row-major: ``index = row * size + col``.
"""

from __future__ import annotations


def index(row: int, col: int, size: int) -> int:
    return row * size + col


def row_col(cell: int, size: int) -> tuple[int, int]:
    return divmod(cell, size)


def in_bounds(cell: int, size: int) -> bool:
    return 0 <= cell < size * size


def is_reachable(origin: int, target: int, size: int) -> bool:
    """Return True if *target* is one orthogonal step away from *origin*.

    Vertical steps jump a full row (``size`` cells); horizontal steps are
    one cell and must stay on the same row, so nothing wraps around the
    board edge.  Both cells must lie on the board.
    """
    if not (in_bounds(origin, size) and in_bounds(target, size)):
        return False
    distance = abs(target - origin)
    if distance == size:
        return True
    return distance == 1 and origin // size == target // size
