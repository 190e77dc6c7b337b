# src/tetris_classic/game/rendering/pygame/renderer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pygame

from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.core.geometry import Vector
from tetris_classic.game.core.pieces import PieceShape
from tetris_classic.game.core.types import Color
from tetris_classic.game.rendering.pygame.palette import RGB, Palette
from tetris_classic.game.rendering.pygame.surf import SurfaceCache, blit_text
from tetris_classic.game.rendering.pygame.window import Layout, compute_layout, create_window

__all__ = ["PygameRenderSink"]


@dataclass(frozen=True)
class Fonts:
    title: pygame.font.Font
    main: pygame.font.Font
    small: pygame.font.Font


@dataclass(frozen=True)
class SidebarLayout:
    panel_gap_y: int = 14
    pad_x: int = 10
    pad_y: int = 8

    next_panel_h: int = 130
    next_cell: int = 18

    stats_panel_h: int = 104
    stats_row_h: int = 22
    stats_value_dx: int = 80

    controls_row_h: int = 18
    controls_desc_dx: int = 96


_SIDEBAR = SidebarLayout()

CONTROLS: Tuple[Tuple[str, str], ...] = (
    ("<- / h", "move left"),
    ("-> / l", "move right"),
    ("down / j", "move down"),
    ("up / k", "rotate"),
    ("space", "quick drop"),
    ("p", "pause"),
    ("q / esc", "quit"),
)


class PygameRenderSink:
    """
    Draws the board, NEXT preview and score panel into a pygame window.

    The board is read cell by cell through Board.cell_color(); the renderer
    never looks at engine internals beyond the game's public attributes.
    """

    def __init__(
            self,
            *,
            cell: int = 28,
            show_grid_lines: bool = False,
            palette: Optional[Palette] = None,
            flash_times: int = 3,
            flash_ms: int = 60,
    ) -> None:
        self.cell = int(cell)
        self.show_grid_lines = bool(show_grid_lines)
        self.palette = palette or Palette()
        self.flash_times = max(0, int(flash_times))
        self.flash_ms = max(0, int(flash_ms))

        title = pygame.font.SysFont("consolas", 28, bold=True) or pygame.font.SysFont(None, 28)
        main = pygame.font.SysFont("consolas", 18) or pygame.font.SysFont(None, 18)
        small = pygame.font.SysFont("consolas", 14) or pygame.font.SysFont(None, 14)
        self.fonts = Fonts(title=title, main=main, small=small)

        self.cache = SurfaceCache()
        self._screen: Optional[pygame.Surface] = None
        self._layout: Optional[Layout] = None

    # ---- RenderSink ----------------------------------------------------------------

    def render(self, game: TetrisGame) -> None:
        screen, layout = self._ensure_window(game)
        screen.fill(self.palette.bg)
        self._draw_board(screen=screen, layout=layout, game=game)
        self._draw_sidebar(screen=screen, layout=layout, game=game)
        if game.game_over:
            self._draw_banner(screen=screen, layout=layout, title="GAME OVER", hint="press q to quit")
        elif game.paused:
            self._draw_banner(screen=screen, layout=layout, title="PAUSED", hint="press p to resume")
        pygame.display.flip()

    def announce_game_over(self, game: TetrisGame) -> None:
        self.render(game)

    def flash_rows(self, game: TetrisGame, rows: Sequence[int]) -> None:
        screen, layout = self._ensure_window(game)
        bar = self.cache.cell(size=layout.cell, color=self.palette.flash, flat=True)
        for i in range(self.flash_times * 2):
            self._draw_board(screen=screen, layout=layout, game=game)
            if i % 2 == 0:
                for y in rows:
                    rect = layout.row_rect(y)
                    for x in range(game.board.width):
                        screen.blit(bar, (rect.x + x * layout.cell, rect.y))
            pygame.display.flip()
            pygame.time.wait(self.flash_ms)

    # ---- drawing -------------------------------------------------------------------

    def _ensure_window(self, game: TetrisGame) -> tuple[pygame.Surface, Layout]:
        if self._screen is None or self._layout is None:
            self._layout = compute_layout(board_w=game.board.width, board_h=game.board.height, cell=self.cell)
            self._screen = create_window(self._layout.window)
        return self._screen, self._layout

    def _text(self, screen: pygame.Surface, font: pygame.font.Font, text: str, pos: Tuple[int, int], color: RGB) -> None:
        blit_text(screen=screen, cache=self.cache, font=font, text=text, pos=pos, color=color)

    def _draw_board(self, *, screen: pygame.Surface, layout: Layout, game: TetrisGame) -> None:
        board = game.board
        for y in range(board.height):
            for x in range(board.width):
                tag = board.cell_color(Vector(x, y))
                rect = layout.cell_rect(x, y)
                block = self.cache.cell(size=layout.cell, color=self.palette.cell(tag), flat=tag is Color.EMPTY)
                screen.blit(block, rect.topleft)
                if self.show_grid_lines:
                    pygame.draw.rect(screen, self.palette.grid, rect, width=1)

        m = layout.margin
        ox, oy = layout.origin
        bw, bh = layout.board_px
        pygame.draw.rect(screen, self.palette.border, pygame.Rect(ox - m, oy - m, bw + 2 * m, bh + 2 * m), width=2)

    def _panel(self, *, screen: pygame.Surface, rect: pygame.Rect, title: str) -> int:
        """Draw a titled panel; returns the y where its body starts."""
        pygame.draw.rect(screen, self.palette.panel_bg, rect)
        pygame.draw.rect(screen, self.palette.border, rect, width=2)
        self._text(screen, self.fonts.main, title, (rect.x + _SIDEBAR.pad_x, rect.y + _SIDEBAR.pad_y), self.palette.muted)
        return rect.y + _SIDEBAR.pad_y + self.fonts.main.get_linesize()

    def _draw_preview(self, *, screen: pygame.Surface, area: pygame.Rect, shape: PieceShape) -> None:
        min_x, min_y, max_x, max_y = shape.bbox(0)
        size = _SIDEBAR.next_cell
        px = area.x + (area.w - (max_x - min_x + 1) * size) // 2
        py = area.y + (area.h - (max_y - min_y + 1) * size) // 2
        block = self.cache.cell(size=size - 1, color=self.palette.cell(shape.color))
        for point in shape.cells(0):
            screen.blit(block, (px + (point.x - min_x) * size, py + (point.y - min_y) * size))

    def _draw_rows(self, *, screen: pygame.Surface, x: int, y: int, rows: Sequence[Tuple[str, str]], dx: int,
                   row_h: int, left_color: RGB, right_color: RGB) -> None:
        for left, right in rows:
            self._text(screen, self.fonts.small, left, (x + _SIDEBAR.pad_x, y), left_color)
            self._text(screen, self.fonts.small, right, (x + _SIDEBAR.pad_x + dx, y), right_color)
            y += row_h

    def _draw_sidebar(self, *, screen: pygame.Surface, layout: Layout, game: TetrisGame) -> None:
        s = _SIDEBAR
        x, y, w = layout.sidebar_x, layout.sidebar_y, layout.sidebar_w

        next_rect = pygame.Rect(x, y, w, s.next_panel_h)
        body_y = self._panel(screen=screen, rect=next_rect, title="NEXT")
        self._draw_preview(
            screen=screen,
            area=pygame.Rect(x, body_y, w, next_rect.bottom - body_y),
            shape=game.next_shape,
        )

        y = next_rect.bottom + s.panel_gap_y
        stats_rect = pygame.Rect(x, y, w, s.stats_panel_h)
        body_y = self._panel(screen=screen, rect=stats_rect, title="SCORE")
        stats = (
            ("score", f"{game.score}"),
            ("lines", f"{game.lines}"),
            ("speed", f"{game.drop_delay_ms} ms"),
        )
        self._draw_rows(
            screen=screen, x=x, y=body_y, rows=stats, dx=s.stats_value_dx, row_h=s.stats_row_h,
            left_color=self.palette.muted, right_color=self.palette.text,
        )

        y = stats_rect.bottom + s.panel_gap_y
        title_h = s.pad_y + self.fonts.main.get_linesize()
        controls_rect = pygame.Rect(x, y, w, title_h + len(CONTROLS) * s.controls_row_h + s.pad_y)
        body_y = self._panel(screen=screen, rect=controls_rect, title="CONTROLS")
        self._draw_rows(
            screen=screen, x=x, y=body_y, rows=CONTROLS, dx=s.controls_desc_dx, row_h=s.controls_row_h,
            left_color=self.palette.text, right_color=self.palette.muted,
        )

    def _draw_banner(self, *, screen: pygame.Surface, layout: Layout, title: str, hint: str) -> None:
        ox, oy = layout.origin
        bw, bh = layout.board_px

        overlay = pygame.Surface((bw, bh), flags=pygame.SRCALPHA)
        overlay.fill(self.palette.overlay_rgba)
        screen.blit(overlay, (ox, oy))

        img = self.cache.label(font=self.fonts.title, text=title, color=self.palette.warn)
        screen.blit(img, (ox + (bw - img.get_width()) // 2, oy + bh // 2 - img.get_height()))
        sub = self.cache.label(font=self.fonts.small, text=hint, color=self.palette.text)
        screen.blit(sub, (ox + (bw - sub.get_width()) // 2, oy + bh // 2 + 6))
