"""Pygame GUI frontend — click-driven, single screen.

Difficulty buttons, a start/restart button, the stats row, the board and
the result banners all live on one window.  Clicking a tile asks the
session to slide it; the clock is a ``pygame.time.set_timer`` event.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import cast

import pygame

from slide_puzzle.backend.engine.gameclock.timer import TickCallback
from slide_puzzle.backend.engine.gameplay import Session, SessionView
from slide_puzzle.backend.engine.gamestate import Phase
from slide_puzzle.frontend.common import format_time, is_warning, tile_origin
from slide_puzzle.settings import DIFFICULTIES, SessionSettings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_BG = (26, 26, 26)
COL_PANEL = (40, 40, 40)
COL_PANEL_HOT = (52, 52, 52)
COL_EMPTY = (18, 18, 18)
COL_TILE = (245, 245, 245)
COL_TEXT = (255, 255, 255)
COL_SUBTEXT = (153, 153, 153)
COL_ACCENT = (255, 107, 107)
COL_ACCENT_HOT = (255, 82, 82)
COL_GREEN = (76, 175, 80)
COL_GOLD = (255, 215, 0)
COL_BADGE = (0, 0, 0, 180)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 520, 860
MARGIN = 24
TILE_GAP = 6
BOARD_TOP = 300
ROW_W = WIN_W - 2 * MARGIN  # button and stats rows
BOARD_SIDE = 400
BOARD_LEFT = (WIN_W - BOARD_SIDE) // 2

TICK_EVENT = pygame.USEREVENT + 1


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------
class PygameTimer:
    """One-second repeating timer backed by the pygame event queue."""

    def __init__(self, callback: TickCallback) -> None:
        self._callback = callback
        self.active = False

    def start(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 1000)
        self.active = True

    def cancel(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)
        # Drop ticks that were queued for the game being left.
        pygame.event.clear(TICK_EVENT)
        self.active = False

    def fire(self) -> None:
        if self.active:
            self._callback()


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_PANEL,
        hover: tuple = COL_PANEL_HOT,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(
            surf, self.hover if self._hot else self.bg, self.rect, border_radius=12
        )
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, ((WIN_W - rendered.get_width()) // 2, y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(
        self,
        size: int,
        settings: SessionSettings | None = None,
        image: Path | None = None,
    ) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Slide Puzzle")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 44, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 26, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 16, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 12, bold=True)

        self._session = Session(size, settings=settings, timer_factory=PygameTimer)
        self._timer = cast(PygameTimer, self._session.timer)
        self._new_best = False

        self._image_path = image
        self._tile_images: dict[int, pygame.Surface] = {}

        self._build_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_btns(self) -> None:
        gap = 10
        bw = (ROW_W - gap * (len(DIFFICULTIES) - 1)) // len(DIFFICULTIES)
        self._size_btns: dict[int, _Btn] = {}
        for i, (label, s) in enumerate(DIFFICULTIES):
            self._size_btns[s] = _Btn(
                (MARGIN + i * (bw + gap), 120, bw, 44),
                f"{label} ({s}×{s})",
                self._f_btn,
            )
        self._start_btn = _Btn(
            (MARGIN, 174, ROW_W, 44),
            "START GAME",
            self._f_btn,
            bg=COL_ACCENT,
            hover=COL_ACCENT_HOT,
        )
        self._all_btns = [*self._size_btns.values(), self._start_btn]

    # ── geometry ────────────────────────────────────────────────────────────

    def _tile_px(self) -> int:
        sz = self._session.size
        return (BOARD_SIDE - (sz - 1) * TILE_GAP) // sz

    def _tile_rect(self, r: int, c: int) -> pygame.Rect:
        tpx = self._tile_px()
        return pygame.Rect(
            BOARD_LEFT + c * (tpx + TILE_GAP),
            BOARD_TOP + r * (tpx + TILE_GAP),
            tpx,
            tpx,
        )

    def _board_bottom(self) -> int:
        sz = self._session.size
        return BOARD_TOP + sz * self._tile_px() + (sz - 1) * TILE_GAP

    def _cell_at(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        sz = self._session.size
        for r in range(sz):
            for c in range(sz):
                if self._tile_rect(r, c).collidepoint(pos):
                    return r, c
        return None

    # ── image tiles ─────────────────────────────────────────────────────────

    def _prepare_tile_images(self) -> None:
        """Slice the picture into one surface per tile value."""
        self._tile_images = {}
        if self._image_path is None:
            return
        try:
            full = pygame.image.load(str(self._image_path)).convert()
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("could not load image %s: %s", self._image_path, exc)
            self._image_path = None
            return

        sz = self._session.size
        tpx = self._tile_px()
        full = pygame.transform.smoothscale(full, (sz * tpx, sz * tpx))
        for val in range(1, sz * sz):
            tr, tc = tile_origin(val, sz)
            self._tile_images[val] = full.subsurface(
                pygame.Rect(tc * tpx, tr * tpx, tpx, tpx)
            ).copy()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        view = self._session.snapshot()
        self._surf.fill(COL_BG)

        _blit_center(
            self._surf, self._f_big.render("SLIDE PUZZLE", True, COL_ACCENT), 24
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                "Complete the puzzle within time limit", True, COL_SUBTEXT
            ),
            80,
        )

        for s, btn in self._size_btns.items():
            selected = s == view.size
            btn.bg = COL_ACCENT if selected else COL_PANEL
            btn.hover = COL_ACCENT_HOT if selected else COL_PANEL_HOT
            btn.draw(self._surf)
        self._start_btn.text = "START GAME" if not view.cells else "RESTART"
        self._start_btn.draw(self._surf)

        if view.cells:
            self._draw_stats(view)
            self._draw_board(view)
        self._draw_footer(view)

    def _draw_stats(self, view: SessionView) -> None:
        warn = is_warning(view.elapsed, view.time_limit)
        boxes = [
            ("MOVES", str(view.moves), COL_ACCENT),
            ("ELAPSED TIME", format_time(view.elapsed), COL_ACCENT_HOT if warn else COL_GREEN),
            ("TIME LEFT", format_time(view.remaining), COL_ACCENT_HOT if warn else COL_TEXT),
        ]
        gap = 10
        bw = (ROW_W - 2 * gap) // 3
        for i, (label, value, col) in enumerate(boxes):
            rect = pygame.Rect(MARGIN + i * (bw + gap), 230, bw, 58)
            pygame.draw.rect(self._surf, COL_PANEL, rect, border_radius=12)
            lbl = self._f_small.render(label, True, COL_SUBTEXT)
            self._surf.blit(lbl, lbl.get_rect(midtop=(rect.centerx, rect.y + 6)))
            val = self._f_title.render(value, True, col)
            self._surf.blit(val, val.get_rect(midbottom=(rect.centerx, rect.bottom - 4)))

    def _draw_board(self, view: SessionView) -> None:
        sz = view.size
        blank = sz * sz
        tpx = self._tile_px()
        f_tile = pygame.font.SysFont("Helvetica", max(14, tpx // 3), bold=True)

        for idx, val in enumerate(view.cells):
            r, c = divmod(idx, sz)
            rect = self._tile_rect(r, c)
            if val == blank:
                pygame.draw.rect(self._surf, COL_EMPTY, rect, border_radius=12)
                pygame.draw.rect(self._surf, COL_PANEL_HOT, rect, width=2, border_radius=12)
                continue
            if val in self._tile_images:
                self._surf.blit(self._tile_images[val], rect.topleft)
                num = self._f_small.render(str(val), True, COL_TEXT)
                badge = pygame.Surface(
                    (num.get_width() + 10, num.get_height() + 6), pygame.SRCALPHA
                )
                badge.fill(COL_BADGE)
                badge.blit(num, (5, 3))
                self._surf.blit(badge, (rect.x + 6, rect.y + 6))
            else:
                pygame.draw.rect(self._surf, COL_TILE, rect, border_radius=12)
                lbl = f_tile.render(str(val), True, COL_BG)
                self._surf.blit(lbl, lbl.get_rect(center=rect.center))

    def _draw_footer(self, view: SessionView) -> None:
        y = (self._board_bottom() if view.cells else BOARD_TOP) + 16

        if view.phase is Phase.COMPLETE:
            _blit_center(
                self._surf, self._f_title.render("★ CLEAR!", True, COL_GREEN), y
            )
            y += 34
            _blit_center(
                self._surf,
                self._f_body.render(
                    f"Time: {format_time(view.elapsed)} | Moves: {view.moves}",
                    True,
                    COL_TEXT,
                ),
                y,
            )
            y += 24
            if self._new_best:
                _blit_center(
                    self._surf,
                    self._f_body.render("New Best Time!", True, COL_GOLD),
                    y,
                )
                y += 24
        elif view.phase is Phase.TIMED_OUT:
            _blit_center(
                self._surf, self._f_title.render("TIME OVER", True, COL_ACCENT_HOT), y
            )
            y += 34
            _blit_center(
                self._surf,
                self._f_body.render("Time limit exceeded", True, COL_TEXT),
                y,
            )
            y += 24

        if view.best_time is not None:
            _blit_center(
                self._surf,
                self._f_body.render(
                    f"BEST TIME  {format_time(view.best_time)}", True, COL_GOLD
                ),
                y + 6,
            )

    # ── event handling ──────────────────────────────────────────────────────

    def _start(self) -> None:
        self._session.start()
        self._new_best = False
        self._prepare_tile_images()

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == TICK_EVENT:
            self._timer.fire()
        elif ev.type == pygame.MOUSEMOTION:
            for btn in self._all_btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for s, btn in self._size_btns.items():
                if btn.hit(ev.pos):
                    self._session.change_difficulty(s)
                    self._new_best = False
                    return True
            if self._start_btn.hit(ev.pos):
                self._start()
                return True
            cell = self._cell_at(ev.pos) if self._session.state else None
            if cell is not None:
                result = self._session.request_move(*cell)
                if result.completed:
                    self._new_best = result.new_best
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break
            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        self._timer.cancel()
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    size: int,
    settings: SessionSettings | None = None,
    image: Path | None = None,
) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(size, settings, image)
    app.run_loop()
