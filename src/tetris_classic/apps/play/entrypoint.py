# src/tetris_classic/apps/play/entrypoint.py
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Any, Optional, Sequence

import pygame

from tetris_classic.config.io import load_game_config
from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.rendering.pygame.input import PygameInputSource
from tetris_classic.game.rendering.pygame.renderer import PygameRenderSink
from tetris_classic.runtime.loop import run_game
from tetris_classic.utils.logging import setup_logger


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play classic falling-block Tetris (pygame).")
    ap.add_argument("--config", type=Path, default=None, help="YAML file with game settings (top-level or under 'game:')")
    ap.add_argument("--width", type=int, default=None, help="override board width")
    ap.add_argument("--height", type=int, default=None, help="override board height")
    ap.add_argument("--seed", type=int, default=None, help="piece RNG seed (default: random)")

    # --- UI ---
    ap.add_argument("--cell", type=int, default=28, help="cell size in pixels")
    ap.add_argument("--show-grid", action="store_true")
    ap.add_argument("--no-repeat", action="store_true", help="disable key auto-repeat")

    # --- logging ---
    ap.add_argument("--log-level", type=str, default="info", choices=["debug", "info", "warning", "error"])
    ap.add_argument("--no-rich", action="store_true", help="disable Rich logging")
    ap.add_argument("--log-file", type=Path, default=None, help="also write a plain-text log here")
    return ap.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    out: dict[str, Any] = {}
    board: dict[str, Any] = {}
    if args.width is not None:
        board["width"] = int(args.width)
    if args.height is not None:
        board["height"] = int(args.height)
    if board:
        out["board"] = board
    if args.seed is not None:
        out["seed"] = int(args.seed)
    return out


def run_play(args: argparse.Namespace) -> int:
    logger = setup_logger(
        name="tetris_classic",
        use_rich=not bool(args.no_rich),
        level=str(args.log_level),
        log_file=args.log_file,
    )

    cfg = load_game_config(args.config, overrides=_overrides(args))
    logger.info("[play] board=%sx%s seed=%s", cfg.board.width, cfg.board.height, cfg.seed)
    if args.config is not None:
        logger.info("[play] cfg=%s", str(Path(args.config).name))

    pygame.init()
    try:
        game = TetrisGame(cfg)
        sink = PygameRenderSink(cell=int(args.cell), show_grid_lines=bool(args.show_grid))
        source = PygameInputSource(key_repeat=None if args.no_repeat else (170, 50))
        try:
            score = asyncio.run(run_game(game, source=source, sink=sink))
        except KeyboardInterrupt:
            logger.warning("[play] interrupted")
            score = int(game.score)
    finally:
        pygame.quit()

    logger.info("[play] final score=%s lines=%s", score, game.lines)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run_play(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
