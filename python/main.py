#!/usr/bin/env python3
"""Phrase Push: push lettered blocks until they spell the phrase.

Usage::

    python main.py                   # interactive menu
    python main.py -f rich           # Rich terminal
    python main.py -f pygame         # Pygame GUI
    python main.py --chain           # push whole rows of blocks at once
    python main.py --print-board     # show the starting board and exit
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.models.board import LayoutError  # noqa: E402
from backend.models.level import Level, RuleSet  # noqa: E402

logger = logging.getLogger("phrase_push")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _launch(frontend: Frontend, level: Level, rules: RuleSet) -> None:
    logger.debug("Launching %s frontend", frontend.value)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(level=level, rules=rules)


def _menu_loop(level: Level, rules: RuleSet) -> None:
    choices = {str(n): f for n, f in enumerate(Frontend, 1)}
    while True:
        print()
        print("  ====================================")
        print("          P H R A S E   P U S H       ")
        print("  ====================================")
        print()
        print(f"  Spell: {level.phrase}")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  5.  Show Board")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], level, rules)
        elif choice == "5":
            print()
            print(GameGenerator.build(level).pretty())
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        envvar="PHRASE_PUSH_FRONTEND",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    push_limit: int = typer.Option(
        1, "--push-limit",
        min=0,
        envvar="PHRASE_PUSH_PUSH_LIMIT",
        help="Most blocks one move may push (0 disables pushing).",
    ),
    chain: bool = typer.Option(
        False, "--chain",
        envvar="PHRASE_PUSH_CHAIN",
        help="Let one move shove any row of blocks that has room; overrides --push-limit.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="PHRASE_PUSH_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
    print_board: bool = typer.Option(
        False, "--print-board",
        help="Print the starting board and exit.",
    ),
) -> None:
    """Phrase Push."""
    _configure_logging(log_level)
    rules = RuleSet(push_limit=None if chain else push_limit)
    level = GameGenerator.default_level()

    try:
        board = GameGenerator.build(level)
    except LayoutError as exc:
        typer.echo(f"Invalid level {level.name!r}: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    if print_board:
        typer.echo(f"Spell: {level.phrase}")
        typer.echo(board.pretty())
        return

    if frontend is None:
        _menu_loop(level, rules)
        return

    _launch(frontend, level, rules)


if __name__ == "__main__":
    app()
