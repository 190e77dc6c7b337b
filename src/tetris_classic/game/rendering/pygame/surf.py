# src/tetris_classic/game/rendering/pygame/surf.py
from __future__ import annotations

from typing import Dict, Tuple

import pygame

from tetris_classic.game.rendering.pygame.palette import RGB


def _shade(rgb: RGB, factor: float) -> RGB:
    r, g, b = rgb
    return (
        max(0, min(255, int(r * factor))),
        max(0, min(255, int(g * factor))),
        max(0, min(255, int(b * factor))),
    )


class SurfaceCache:
    """
    Per-(size, rgb) block sprites and per-(font, text, rgb) labels.

    Blocks get a light top/left edge and a dark bottom/right edge; flat=True
    skips the bevel (empty cells, flash bars).
    """

    def __init__(self) -> None:
        self._blocks: Dict[Tuple[int, RGB, bool], pygame.Surface] = {}
        self._labels: Dict[Tuple[int, str, RGB], pygame.Surface] = {}

    def cell(self, *, size: int, color: RGB, flat: bool = False) -> pygame.Surface:
        key = (int(size), color, bool(flat))
        surf = self._blocks.get(key)
        if surf is not None:
            return surf

        s = int(size)
        surf = pygame.Surface((s, s))
        surf.fill(color)
        if not flat and s >= 6:
            edge = max(1, s // 8)
            hi = _shade(color, 1.35)
            lo = _shade(color, 0.6)
            pygame.draw.rect(surf, hi, pygame.Rect(0, 0, s, edge))
            pygame.draw.rect(surf, hi, pygame.Rect(0, 0, edge, s))
            pygame.draw.rect(surf, lo, pygame.Rect(0, s - edge, s, edge))
            pygame.draw.rect(surf, lo, pygame.Rect(s - edge, 0, edge, s))
        self._blocks[key] = surf
        return surf

    def label(self, *, font: pygame.font.Font, text: str, color: RGB) -> pygame.Surface:
        key = (id(font), str(text), color)
        img = self._labels.get(key)
        if img is None:
            img = font.render(str(text), True, color)
            self._labels[key] = img
        return img

    def clear(self) -> None:
        self._blocks.clear()
        self._labels.clear()


def blit_text(
        *,
        screen: pygame.Surface,
        cache: SurfaceCache,
        font: pygame.font.Font,
        text: str,
        pos: Tuple[int, int],
        color: RGB,
) -> None:
    screen.blit(cache.label(font=font, text=text, color=color), pos)


__all__ = ["SurfaceCache", "blit_text"]
