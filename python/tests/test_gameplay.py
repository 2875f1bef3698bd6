"""Game sessions: lifecycle, notifications and a full solve of the default level."""

from __future__ import annotations

from collections import deque

import pytest

from backend.engine.gameplay import GamePlay
from backend.models import grid
from backend.models.board import Direction
from backend.models.events import TileChange

from conftest import Recorder, make_board, make_game, positions


def _walk_to(game: GamePlay, target: int) -> None:
    """Walk the player to *target* through vacant cells only."""
    board = game.state.board
    start = board.player.position
    came_from: dict[int, tuple[int, Direction] | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == target:
            break
        for direction in Direction:
            nxt = cell + direction.offset(board.size)
            if nxt in came_from or not grid.is_reachable(cell, nxt, board.size):
                continue
            if not board.is_vacant(nxt):
                continue
            came_from[nxt] = (cell, direction)
            queue.append(nxt)
    assert target in came_from, f"no path to {target}"

    steps: list[Direction] = []
    cell = target
    while came_from[cell] is not None:
        cell, direction = came_from[cell]
        steps.append(direction)
    for direction in reversed(steps):
        assert game.move(direction)


def _push(game: GamePlay, direction: Direction, times: int) -> None:
    for _ in range(times):
        assert game.move(direction)


# (row, col) to stand on, push direction, number of pushes
_SOLUTION = [
    ((4, 3), Direction.DOWN, 2),    # com
    ((7, 2), Direction.RIGHT, 6),
    ((5, 9), Direction.LEFT, 1),    # mail
    ((4, 7), Direction.DOWN, 2),
    ((2, 8), Direction.DOWN, 4),    # .
    ((2, 4), Direction.RIGHT, 1),   # ton
    ((1, 6), Direction.DOWN, 5),
    ((5, 6), Direction.LEFT, 1),    # @
    ((4, 4), Direction.DOWN, 2),
    ((1, 8), Direction.LEFT, 2),    # pro
    ((0, 5), Direction.DOWN, 6),
    ((4, 0), Direction.RIGHT, 2),   # mah
    ((3, 3), Direction.DOWN, 3),
    ((0, 2), Direction.DOWN, 6),    # toe
]


def _solve(game: GamePlay) -> None:
    for (row, col), direction, times in _SOLUTION:
        _walk_to(game, grid.index(row, col, game.size))
        _push(game, direction, times)


# -- full playthrough ---------------------------------------------------------------


def test_default_level_can_be_solved(recorder: Recorder) -> None:
    game = GamePlay()
    recorder.attach(game)
    game.start()

    _solve(game)

    assert game.is_won
    assert not game.accepting_input
    assert len(recorder.victories) == 1
    victory = recorder.victories[0]
    assert victory.anchor == 72
    assert victory.span == 8
    assert victory.hidden == tuple(range(73, 80))
    assert victory.phrase == "toemah@protonmail.com"
    assert [b.fragment for b in victory.blocks] == [
        "toe", "mah", "@", "pro", "ton", "mail", ".", "com",
    ]
    assert game.state.victory is victory


def test_nothing_moves_after_victory(recorder: Recorder) -> None:
    game = GamePlay()
    recorder.attach(game)
    game.start()
    _solve(game)
    moves = game.state.moves
    seen = len(recorder.changes)
    player = game.state.board.player

    for direction in Direction:
        assert not game.move(direction)
        assert not game.attempt_move(player, direction.offset(game.size))

    assert game.state.moves == moves
    assert len(recorder.changes) == seen
    assert len(recorder.victories) == 1


# -- lifecycle -------------------------------------------------------------------------


def test_start_draws_every_cell(recorder: Recorder) -> None:
    game = make_game(3, 4, [(0, "ab")], "ab")
    recorder.attach(game)

    game.start()

    assert [c.index for c in recorder.changes] == list(range(9))
    assert recorder.changes[0].tile is game.state.board.get(0)
    assert recorder.changes[4].tile is game.state.board.player
    assert recorder.changes[1] == TileChange(1, vacant=True)


def test_start_twice_draws_once(recorder: Recorder) -> None:
    game = make_game(2, 0, [], "x")
    recorder.attach(game)
    game.start()
    game.start()
    assert len(recorder.changes) == 4


def test_moves_before_start_are_ignored() -> None:
    game = make_game(3, 4, [], "x")
    assert not game.accepting_input
    assert not game.move(Direction.UP)
    assert game.state.board.player.position == 4
    assert game.state.moves == 0


def test_end_detaches_input_and_is_idempotent() -> None:
    game = make_game(3, 4, [], "x")
    game.start()
    game.end()
    game.end()
    assert not game.accepting_input
    assert not game.move(Direction.UP)


def test_ended_session_cannot_restart() -> None:
    game = make_game(3, 4, [], "x")
    game.start()
    game.end()
    with pytest.raises(RuntimeError):
        game.start()


def test_context_manager_pairs_start_and_end() -> None:
    with make_game(3, 4, [], "x") as game:
        assert game.accepting_input
        assert game.move(Direction.LEFT)
    assert not game.accepting_input


def test_move_counter_counts_only_real_moves() -> None:
    game = make_game(3, 0, [], "x")
    game.start()
    assert not game.move(Direction.UP)
    assert game.move(Direction.RIGHT)
    assert game.move(Direction.DOWN)
    assert game.state.moves == 2


# -- notifications --------------------------------------------------------------------


def test_victory_is_announced_once_and_ends_the_session(recorder: Recorder) -> None:
    game = make_game(4, 10, [(1, "ab"), (6, "cd")], "abcd")
    recorder.attach(game)
    game.start()
    accepting: list[bool] = []
    game.subscribe(on_victory=lambda _: accepting.append(game.accepting_input))

    assert game.move(Direction.UP)

    assert len(recorder.victories) == 1
    assert recorder.victories[0].anchor == 1
    assert accepting == [False]
    assert not game.move(Direction.LEFT)


def test_player_step_alone_never_scans() -> None:
    game = make_game(3, 4, [(0, "a")], "a")
    game.start()
    assert game.move(Direction.RIGHT)
    assert not game.is_won


def test_block_behind_block_push_is_a_no_op_by_default(recorder: Recorder) -> None:
    game = make_game(5, 0, [(1, "a"), (2, "b")], "ab")
    recorder.attach(game)
    game.start()
    drawn = len(recorder.changes)

    assert not game.move(Direction.RIGHT)

    assert positions(game.state.board) == {"a": 1, "b": 2, "player-tile": 0}
    assert len(recorder.changes) == drawn
    assert recorder.victories == []
    assert game.state.moves == 0


def test_chain_push_scans_every_moved_block(recorder: Recorder) -> None:
    game = make_game(5, 0, [(1, "a"), (2, "b")], "ab", push_limit=None)
    recorder.attach(game)
    game.start()

    assert game.move(Direction.RIGHT)

    assert len(recorder.victories) == 1
    assert recorder.victories[0].anchor == 2
    assert recorder.victories[0].hidden == (3,)


def test_attempt_move_can_drive_a_block_directly(recorder: Recorder) -> None:
    game = make_game(3, 8, [(0, "a"), (2, "b")], "ab")
    recorder.attach(game)
    block = game.state.board.get(0)

    assert game.attempt_move(block, 1)

    assert block.position == 1
    assert recorder.victories[0].anchor == 1
    assert game.state.moves == 0


def test_attempt_move_is_ignored_after_end(recorder: Recorder) -> None:
    game = make_game(3, 8, [(0, "a"), (2, "b")], "ab")
    recorder.attach(game)
    game.start()
    game.end()
    drawn = len(recorder.changes)
    block = game.state.board.get(0)

    assert not game.attempt_move(block, 1)
    assert not game.attempt_move(game.state.board.player, -3)

    assert block.position == 0
    assert game.state.board.player.position == 8
    assert len(recorder.changes) == drawn
    assert recorder.victories == []
    assert not game.is_won


def test_unsubscribe_stops_notifications() -> None:
    game = make_game(3, 4, [], "x")
    seen: list[TileChange] = []
    unsubscribe = game.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    game.start()
    assert seen == []


def test_session_from_existing_board(recorder: Recorder) -> None:
    board = make_board(3, 0, a=1)
    game = GamePlay.from_board(board, "a")
    recorder.attach(game)
    game.start()

    assert game.level is None
    assert game.state.board is board
    assert game.move(Direction.RIGHT)
    assert game.is_won
    assert recorder.victories[0].anchor == 2


def test_clock_stops_when_the_session_ends() -> None:
    game = make_game(3, 4, [], "x")
    game.start()
    assert game.state.clock_running
    game.end()
    frozen = game.state.elapsed_time
    assert not game.state.clock_running
    assert game.state.elapsed_time == frozen
