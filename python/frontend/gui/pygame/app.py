"""Pygame GUI frontend — fully self-contained.

Draws the board from a ``BoardView`` fed by the session's events, with a
win banner once the phrase is assembled.  No terminal interaction
required.
"""

from __future__ import annotations

import enum

import pygame

from backend.engine.gameplay import GamePlay
from backend.models.board import Direction
from backend.models.level import Level, RuleSet
from frontend.board_view import BoardView, CellKind

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 640, 820
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 96
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px

_DIRS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class _Screen(enum.Enum):
    PLAYING = "playing"
    WON = "won"


def tile_size(board_px: int, size: int) -> int:
    """Largest even tile side that fits *size* tiles in *board_px* pixels."""
    return 2 * int((board_px / size) * 0.5)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, level: Level, rules: RuleSet) -> None:
        self._level = level
        self._rules = rules

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Phrase Push")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 34, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._game: GamePlay | None = None
        self._view: BoardView | None = None
        self._screen = _Screen.PLAYING
        self._start_game()

    # ── helpers ─────────────────────────────────────────────────────────────

    @staticmethod
    def _fmt(seconds: float) -> str:
        m, s = divmod(int(seconds), 60)
        return f"{m:02d}:{s:02d}"

    def _tile_layout(self) -> tuple[int, int, int]:
        """Return (tile_px, origin_x, total_px) for the current board."""
        assert self._view is not None
        sz = self._view.size
        tpx = tile_size(BOARD_MAX - (sz + 1) * TILE_GAP, sz)
        total = sz * tpx + (sz + 1) * TILE_GAP
        return tpx, _cx(total) + TILE_GAP, total

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        view = self._view
        assert view is not None
        tpx, ox, total = self._tile_layout()
        oy = BOARD_TOP + TILE_GAP
        f_tile = pygame.font.SysFont("Helvetica", max(12, tpx // 3), bold=True)

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(total), BOARD_TOP, total, total),
            border_radius=10,
        )

        for row in range(view.size):
            for i, span in view.segments(row):
                col = i % view.size
                rect = pygame.Rect(
                    ox + col * (tpx + TILE_GAP),
                    oy + row * (tpx + TILE_GAP),
                    span * tpx + (span - 1) * TILE_GAP,
                    tpx,
                )
                match view.kinds[i]:
                    case CellKind.PLAYER:
                        pygame.draw.ellipse(self._surf, COL_PINK, rect.inflate(-8, -8))
                        continue
                    case CellKind.BLOCK:
                        fill = COL_BLUE
                    case CellKind.MERGED:
                        fill = COL_GREEN
                    case _:
                        continue
                pygame.draw.rect(self._surf, fill, rect, border_radius=6)
                lbl = f_tile.render(view.labels[i], True, COL_BASE)
                self._surf.blit(
                    lbl,
                    (
                        rect.centerx - lbl.get_width() // 2,
                        rect.centery - lbl.get_height() // 2,
                    ),
                )

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None

        _blit_center(
            self._surf,
            self._f_title.render(f"Spell:  {game.state.phrase}", True, COL_TEXT),
            18,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Moves: {game.state.moves}    "
                f"Time: {self._fmt(game.state.elapsed_time)}",
                True,
                COL_PINK,
            ),
            54,
        )

        self._draw_board()

        _, _, total = self._tile_layout()
        footer_y = BOARD_TOP + total + 16
        if self._screen is _Screen.WON:
            _blit_center(
                self._surf,
                self._f_big.render("★  S P E L L E D  ★", True, COL_GREEN),
                footer_y,
            )
            hint_text = "R  play again     Esc  quit"
            footer_y += 52
        else:
            hint_text = "Arrows / WASD  move     R  restart     Esc  quit"
        _blit_center(
            self._surf,
            self._f_small.render(hint_text, True, COL_OVERLAY0),
            footer_y,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _on_key(self, key: int) -> bool:
        game = self._game
        assert game is not None
        if key in _DIRS:
            game.move(_DIRS[key])
        elif key == pygame.K_r:
            self._start_game()
        elif key in (pygame.K_ESCAPE, pygame.K_q):
            return False
        return True

    def _on_victory(self, _victory: object) -> None:
        self._screen = _Screen.WON

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        if self._game is not None:
            self._game.end()
        self._game = GamePlay(self._level, self._rules)
        self._view = BoardView.attach(self._game)
        self._game.subscribe(on_victory=self._on_victory)
        self._screen = _Screen.PLAYING
        self._game.start()

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if ev.type == pygame.KEYDOWN and not self._on_key(ev.key):
                    running = False
                    break

            self._draw_game()
            pygame.display.flip()
            self._clock.tick(30)

        if self._game is not None:
            self._game.end()
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(level: Level, rules: RuleSet) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(level, rules)
    app.run_loop()
