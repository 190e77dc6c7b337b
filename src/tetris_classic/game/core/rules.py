# src/tetris_classic/game/core/rules.py
from __future__ import annotations

from tetris_classic.config.game import GravityConfig, ScoringConfig


def points_for_rows(rows_cleared: int, cfg: ScoringConfig) -> int:
    """1 row -> base, 2 -> 2*base, 3 -> 4*base, 4 -> 8*base."""
    if rows_cleared <= 0:
        return 0
    return int(cfg.base_points) * (2 ** (int(rows_cleared) - 1))


def drop_delay_ms(score: int, cfg: GravityConfig) -> int:
    steps = max(0, int(score)) // int(cfg.points_per_step)
    return max(int(cfg.min_ms), int(cfg.initial_ms) - int(cfg.step_ms) * steps)


__all__ = ["points_for_rows", "drop_delay_ms"]
