"""The event-driven board mirror every frontend draws from."""

from __future__ import annotations

from backend.models.board import Direction
from frontend.board_view import BoardView, CellKind

from conftest import make_game


def test_view_mirrors_the_board_after_start() -> None:
    game = make_game(3, 4, [(0, "toe"), (8, "@")], "toe@")
    view = BoardView.attach(game)
    game.start()

    assert view.kinds[0] is CellKind.BLOCK
    assert view.labels[0] == "toe"
    assert view.kinds[4] is CellKind.PLAYER
    assert view.labels[4] == ""
    assert view.kinds[8] is CellKind.BLOCK
    assert view.kinds[1] is CellKind.VACANT
    assert view.cell_width() == 3
    assert view.segments(1) == [(3, 1), (4, 1), (5, 1)]


def test_view_follows_moves_and_pushes() -> None:
    game = make_game(4, 4, [(5, "a")], "ab")
    view = BoardView.attach(game)
    game.start()

    game.move(Direction.RIGHT)

    assert view.kinds[4] is CellKind.VACANT
    assert view.kinds[5] is CellKind.PLAYER
    assert view.kinds[6] is CellKind.BLOCK
    assert view.labels[6] == "a"
    assert view.labels[5] == ""


def test_victory_merges_the_row_into_one_wide_cell() -> None:
    game = make_game(4, 0, [(1, "ab"), (6, "cd")], "abcd")
    view = BoardView.attach(game)
    game.start()
    game.move(Direction.DOWN)   # 0 -> 4
    game.move(Direction.RIGHT)  # 4 -> 5
    game.move(Direction.DOWN)   # 5 -> 9
    game.move(Direction.RIGHT)  # 9 -> 10
    game.move(Direction.UP)     # push "cd" from 6 to 2

    assert view.victory is not None
    assert view.kinds[1] is CellKind.MERGED
    assert view.labels[1] == "abcd"
    assert view.kinds[2] is CellKind.HIDDEN
    assert view.span(1) == 2
    assert view.span(0) == 1
    assert view.segments(0) == [(0, 1), (1, 2), (3, 1)]
    assert view.segments(1) == [(4, 1), (5, 1), (6, 1), (7, 1)]


def test_view_without_events_is_all_vacant() -> None:
    view = BoardView(2)
    assert view.kinds == [CellKind.VACANT] * 4
    assert view.cell_width() == 1
    assert view.victory is None
