from __future__ import annotations

from tetris_classic.config.base import ConfigBase, deep_merge
from tetris_classic.config.game import BoardConfig, GameConfig, GravityConfig, ScoringConfig
from tetris_classic.config.io import load_game_config, load_yaml

__all__ = [
    "ConfigBase",
    "deep_merge",
    "BoardConfig",
    "ScoringConfig",
    "GravityConfig",
    "GameConfig",
    "load_yaml",
    "load_game_config",
]
