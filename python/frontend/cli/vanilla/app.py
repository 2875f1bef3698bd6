"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
The board is drawn from a ``BoardView`` fed by the session's events.
"""

from __future__ import annotations

import sys

from backend.engine.gameplay import GamePlay
from backend.models.level import Level, RuleSet
from frontend.board_view import BoardView, CellKind
from frontend.cli.input_handler import get_key, get_key_timeout, to_direction


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_M = "\033[45;30m"   # magenta bg, black fg (player token)
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


def _stats_line(game: GamePlay) -> str:
    """Return the formatted Moves + Time string (no newline)."""
    return (
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{_format_time(game.state.elapsed_time)}{_R}"
    )


# -- board rendering ----------------------------------------------------------


def _render_board(view: BoardView) -> str:
    """Return an ANSI-coloured text representation of the board."""
    cell_w = view.cell_width() + 2
    sep = "+" + (("-" * cell_w + "+") * view.size)

    lines: list[str] = [sep]
    for row in range(view.size):
        cells: list[str] = []
        for i, span in view.segments(row):
            width = cell_w * span + (span - 1)
            label = view.labels[i]
            match view.kinds[i]:
                case CellKind.PLAYER:
                    cells.append(f"{_M}{'@':^{width}}{_R}")
                case CellKind.MERGED:
                    cells.append(f"{_G}{label:^{width}}{_R}")
                case CellKind.BLOCK:
                    cells.append(f"{_BOLD}{label:^{width}}{_R}")
                case _:
                    cells.append(f"{_DIM}{'·':^{width}}{_R}")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, view: BoardView, status: str = "") -> None:
    """Draw the full game screen.

    The stats line (Moves + Time) is printed last, with no trailing
    newline, so ``_update_time`` can cheaply overwrite it in-place
    using ``\\r\\033[K``.
    """
    _clear()
    print(f"  {_C}=== Phrase Push ({game.size}×{game.size}) ==={_R}")
    print(f"  {_DIM}Spell:{_R} {_BOLD}{game.state.phrase}{_R}")
    print()
    print(_render_board(view))
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}H{_R}: help  |  "
        f"{_C}Q{_R}: quit"
    )
    if status:
        print(f"  {status}")
    sys.stdout.write(f"\n{_stats_line(game)}")
    sys.stdout.flush()


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats (last) line in-place."""
    sys.stdout.write(f"\r\033[K{_stats_line(game)}")
    sys.stdout.flush()


def _show_win(game: GamePlay, view: BoardView) -> None:
    _clear()
    print(f"  {_G}=== Phrase Push ({game.size}×{game.size}) ==={_R}")
    print()
    print(_render_board(view))
    print()
    print(f"  {_G}★ You spelled {game.state.phrase!r}! ★{_R}")
    print()
    print(
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{_format_time(game.state.elapsed_time)}{_R}"
    )


_HELP = (
    f"Push the lettered blocks with your token ({_M}@{_R}) until they "
    f"read the phrase left to right."
)


# -- game loop ----------------------------------------------------------------


def _new_session(level: Level, rules: RuleSet) -> tuple[GamePlay, BoardView]:
    game = GamePlay(level, rules)
    view = BoardView.attach(game)
    game.start()
    return game, view


def _play_game(level: Level, rules: RuleSet) -> None:
    while True:
        game, view = _new_session(level, rules)
        status = ""

        while game.accepting_input:
            _show_game(game, view, status)
            status = ""

            # Wait for input; update the time display every 0.5 s.
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                _update_time(game)

            direction = to_direction(key)
            if direction is not None:
                game.move(direction)
            elif key == "help":
                status = _HELP
            elif key == "print":
                status = "\n" + game.state.board.pretty()
            elif key == "restart":
                game.end()
                game, view = _new_session(level, rules)
            elif key == "quit":
                game.end()
                return

        # -- win ---------------------------------------------------------------
        _show_win(game, view)
        print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to quit.")

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


# -- public entry point -------------------------------------------------------


def run(level: Level, rules: RuleSet) -> None:
    """Launch the vanilla CLI."""
    _play_game(level, rules)
    _clear()
    print("  Goodbye!\n")
