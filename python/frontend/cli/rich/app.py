"""Rich terminal frontend — colours, panels and a live clock.

Uses the ``rich`` library for styled output while sharing the same
input handler, engine and ``BoardView`` as the vanilla CLI.
"""

from __future__ import annotations

import sys

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.level import Level, RuleSet
from frontend.board_view import BoardView, CellKind
from frontend.cli.input_handler import get_key, get_key_timeout, to_direction

console = Console()

_STYLES: dict[CellKind, str] = {
    CellKind.PLAYER: "bold black on magenta",
    CellKind.BLOCK: "bold white on #313244",
    CellKind.MERGED: "bold black on green",
    CellKind.VACANT: "dim",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def _render_board(view: BoardView) -> Text:
    """Return the grid as styled text, one line per board row."""
    cell_w = view.cell_width() + 2
    board = Text()
    for row in range(view.size):
        if row:
            board.append("\n")
        for n, (i, span) in enumerate(view.segments(row)):
            if n:
                board.append(" ")
            width = cell_w * span + (span - 1)
            kind = view.kinds[i]
            match kind:
                case CellKind.PLAYER:
                    label = "@"
                case CellKind.VACANT:
                    label = "·"
                case _:
                    label = view.labels[i]
            board.append(f"{label:^{width}}", style=_STYLES[kind])
    return board


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, view: BoardView, status: str = "") -> None:
    """Draw the game screen."""
    console.clear()

    goal = Text()
    goal.append("Spell  ", style="dim")
    goal.append(game.state.phrase, style="bold cyan")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  print   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Group(Align.center(goal), Text(""), Align.center(_render_board(view))),
        title=f"[bold cyan]Phrase Push  {game.size}×{game.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save cursor position right before the stats line so _update_time()
    # can later restore to this exact spot and overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position.

    Uses raw ANSI codes (bypassing Rich) so only the single stats
    line is repainted, without redrawing the board.
    """
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    m, s = divmod(int(game.state.elapsed_time), 60)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{game.state.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{m:02d}:{s:02d}{_RS}"
    )

    # Centre the visible text to match what Rich would produce.
    visible_len = len(f"Moves: {game.state.moves}    Time: {m:02d}:{s:02d}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(game: GamePlay, view: BoardView) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SPELLED IT!", style="bold green")
    congrats.append(f"  {game.state.phrase}  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(_render_board(view)),
        Align.center(congrats),
        Align.center(_stats(game)),
    )

    panel = Panel(
        group,
        title=f"[bold green]Phrase Push  {game.size}×{game.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


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
            _draw_game(game, view, status)
            status = ""

            # Wait for input with a short timeout so the clock keeps ticking.
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                _update_time(game)

            direction = to_direction(key)
            if direction is not None:
                game.move(direction)
            elif key == "print":
                console.print(game.state.board.pretty(), markup=False)
                get_key()
            elif key == "help":
                status = (
                    "[dim]Push the lettered blocks until they read the "
                    "phrase from left to right.[/dim]"
                )
            elif key == "restart":
                game.end()
                game, view = _new_session(level, rules)
            elif key == "quit":
                game.end()
                return

        # -- win ---------------------------------------------------------------
        _draw_win(game, view)
        console.print(
            Align.center(
                Text(
                    "\n  Press R to play again, Q to quit.\n",
                    style="dim",
                )
            )
        )

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


# -- public entry point -------------------------------------------------------


def run(level: Level, rules: RuleSet) -> None:
    """Launch the Rich CLI."""
    _play_game(level, rules)
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
