"""PyQt6 GUI frontend — fully self-contained.

One label per cell in a grid layout.  Labels are repainted only when the
session reports a tile change; on victory the winning labels collapse
into a single label spanning their columns.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GamePlay
from backend.models.board import Direction
from backend.models.events import TileChange, Victory
from backend.models.level import Level, RuleSet

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_PINK = "#f5c2e7"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_CELL_CSS = {
    "vacant": f"background:{_MANTLE}; border-radius:6px;",
    "block": f"background:{_BLUE}; color:{_BASE}; border-radius:6px; font-weight:bold;",
    "player": f"background:{_PINK}; border-radius:{{r}}px;",
    "merged": f"background:{_GREEN}; color:{_BASE}; border-radius:6px; font-weight:bold;",
}

_DIRS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}

_HINT = "Arrows / WASD  move     R  restart     Esc  quit"


def _fmt(secs: float) -> str:
    m, s = divmod(int(secs), 60)
    return f"{m:02d}:{s:02d}"


class _GamePage(QWidget):
    """The board, the goal phrase and live stats for one session."""

    def __init__(self, level: Level, rules: RuleSet) -> None:
        super().__init__()
        self.setObjectName("page")
        self.game = GamePlay(level, rules)
        size = self.game.size

        self._tile_px = max(32, min(72, 560 // size))
        f_sz = max(10, self._tile_px // 4)

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        goal = QLabel(f"Spell:  {self.game.state.phrase}")
        goal.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        goal.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(goal)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_BASE}; border-radius:10px;")
        self._grid = QGridLayout(frame)
        self._grid.setSpacing(4)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._cells: list[QLabel] = []
        for i in range(size * size):
            cell = QLabel()
            cell.setMinimumSize(self._tile_px, self._tile_px)
            cell.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
            cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._grid.addWidget(cell, i // size, i % size)
            self._cells.append(cell)

        self._hint = QLabel(_HINT)
        self._hint.setFont(QFont("Helvetica", 11))
        self._hint.setStyleSheet(f"color:{_OVERLAY0};")
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._hint)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(200)

        self.game.subscribe(self._on_tile_change, self._on_victory)
        self.game.start()
        self._tick()

    # -- session events --

    def _on_tile_change(self, change: TileChange) -> None:
        cell = self._cells[change.index]
        if change.vacant or change.tile is None:
            cell.setText("")
            cell.setStyleSheet(_CELL_CSS["vacant"])
        elif change.tile.is_player:
            cell.setText("")
            cell.setStyleSheet(_CELL_CSS["player"].format(r=self._tile_px // 2))
        else:
            cell.setText(change.tile.fragment)
            cell.setStyleSheet(_CELL_CSS["block"])

    def _on_victory(self, victory: Victory) -> None:
        size = self.game.size
        for i in victory.hidden:
            self._cells[i].hide()
        anchor = self._cells[victory.anchor]
        self._grid.removeWidget(anchor)
        self._grid.addWidget(
            anchor, victory.anchor // size, victory.anchor % size, 1, victory.span
        )
        anchor.setText(victory.phrase)
        anchor.setStyleSheet(_CELL_CSS["merged"])

        self._timer.stop()
        self._tick()
        self._hint.setText("Spelled it!   R  play again     Esc  quit")
        self._hint.setStyleSheet(f"color:{_GREEN};font-weight:bold;")

    # -- helpers --

    def _tick(self) -> None:
        self._stats.setText(
            f"Moves: {self.game.state.moves}    "
            f"Time: {_fmt(self.game.state.elapsed_time)}"
        )

    def move(self, d: Direction) -> None:
        if self.game.move(d):
            self._tick()

    def close_session(self) -> None:
        self._timer.stop()
        self.game.end()


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    def __init__(self, level: Level, rules: RuleSet) -> None:
        super().__init__()
        self._level = level
        self._rules = rules
        self._page: _GamePage | None = None

        self.setWindowTitle("Phrase Push")
        self.setStyleSheet(_GLOBAL_CSS)
        self._restart()

    def _restart(self) -> None:
        if self._page is not None:
            self._page.close_session()
        self._page = _GamePage(self._level, self._rules)
        old = self.takeCentralWidget()
        if old is not None:
            old.deleteLater()
        self.setCentralWidget(self._page)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None or self._page is None:
            return
        key = event.key()
        if key in _DIRS:
            self._page.move(_DIRS[key])
        elif key == Qt.Key.Key_R:
            self._restart()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # noqa: N802
        if self._page is not None:
            self._page.close_session()
        super().closeEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(level: Level, rules: RuleSet) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(level, rules)
    window.show()
    qapp.exec()
