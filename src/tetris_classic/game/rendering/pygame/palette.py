# src/tetris_classic/game/rendering/pygame/palette.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from tetris_classic.game.core.types import Color as ColorTag

RGB = Tuple[int, int, int]


def _default_piece_colors() -> Dict[ColorTag, RGB]:
    return {
        ColorTag.YELLOW: (240, 220, 60),
        ColorTag.RED: (225, 70, 70),
        ColorTag.GREEN: (80, 200, 90),
        ColorTag.MAGENTA: (190, 90, 220),
        ColorTag.WHITE: (225, 225, 235),
        ColorTag.BLUE: (70, 110, 230),
        ColorTag.CYAN: (70, 210, 225),
    }


@dataclass(frozen=True)
class Palette:
    bg: RGB = (20, 20, 24)
    panel_bg: RGB = (26, 26, 30)
    empty: RGB = (30, 30, 34)
    grid: RGB = (45, 45, 52)
    border: RGB = (90, 90, 105)

    text: RGB = (220, 220, 230)
    muted: RGB = (170, 170, 185)
    warn: RGB = (240, 160, 90)

    flash: RGB = (250, 250, 250)
    fallback_piece: RGB = (180, 180, 200)
    overlay_rgba: Tuple[int, int, int, int] = (0, 0, 0, 150)

    pieces: Dict[ColorTag, RGB] = field(default_factory=_default_piece_colors)

    def cell(self, tag: ColorTag) -> RGB:
        if tag is ColorTag.EMPTY:
            return self.empty
        return self.pieces.get(tag, self.fallback_piece)


__all__ = ["RGB", "Palette"]
