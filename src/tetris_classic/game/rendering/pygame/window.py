# src/tetris_classic/game/rendering/pygame/window.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame

SIDEBAR_W = 240
BOARD_PAD = 24
MIN_WINDOW_H = 420


@dataclass(frozen=True)
class WindowSpec:
    width: int
    height: int
    title: str = "Tetris Classic"


@dataclass(frozen=True)
class Layout:
    """Pixel geometry of the board well and the sidebar to its right."""

    origin: Tuple[int, int]
    cell: int
    board_cols: int
    board_rows: int
    margin: int
    sidebar_x: int
    sidebar_y: int
    sidebar_w: int
    window: WindowSpec

    @property
    def board_px(self) -> Tuple[int, int]:
        return self.board_cols * self.cell, self.board_rows * self.cell

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        ox, oy = self.origin
        return pygame.Rect(ox + int(x) * self.cell, oy + int(y) * self.cell, self.cell, self.cell)

    def row_rect(self, y: int) -> pygame.Rect:
        ox, oy = self.origin
        return pygame.Rect(ox, oy + int(y) * self.cell, self.board_cols * self.cell, self.cell)


def create_window(spec: WindowSpec) -> pygame.Surface:
    pygame.display.set_caption(spec.title)
    return pygame.display.set_mode((int(spec.width), int(spec.height)))


def compute_layout(*, board_w: int, board_h: int, cell: int, sidebar_w: int = SIDEBAR_W) -> Layout:
    cell = max(4, int(cell))
    margin = 6
    ox = oy = BOARD_PAD
    well_w = int(board_w) * cell
    well_h = int(board_h) * cell

    sidebar_x = ox + well_w + margin + BOARD_PAD
    window_w = sidebar_x + int(sidebar_w) + BOARD_PAD // 2
    window_h = max(oy + well_h + margin + BOARD_PAD, MIN_WINDOW_H)

    return Layout(
        origin=(ox, oy),
        cell=cell,
        board_cols=int(board_w),
        board_rows=int(board_h),
        margin=margin,
        sidebar_x=sidebar_x,
        sidebar_y=oy - margin,
        sidebar_w=int(sidebar_w),
        window=WindowSpec(width=window_w, height=window_h),
    )


__all__ = ["SIDEBAR_W", "WindowSpec", "Layout", "create_window", "compute_layout"]
