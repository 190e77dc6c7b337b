# src/tetris_classic/config/io.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from tetris_classic.config.game import GameConfig

logger = logging.getLogger(__name__)


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Read a YAML file; the top level must be a mapping (an empty file counts as {}).

    No schema validation here.
    """
    cfg_path = Path(path)
    with cfg_path.open("r", encoding="utf-8") as f:
        obj = yaml.safe_load(f)
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise TypeError(f"config({cfg_path}) must be a mapping, got {type(obj).__name__}")
    return obj


def load_game_config(path: Optional[Path] = None, *, overrides: Optional[Mapping[str, Any]] = None) -> GameConfig:
    """
    GameConfig from an optional YAML file plus optional overrides (CLI flags).

    The file may hold the settings at top level or under a `game:` key.
    """
    cfg = GameConfig()
    if path is not None:
        raw = load_yaml(path)
        node = raw.get("game", raw)
        if not isinstance(node, dict):
            raise TypeError(f"config({path}).game must be a mapping, got {type(node).__name__}")
        cfg = GameConfig.model_validate(node)
        logger.debug("[config] loaded path=%s", path)
    if overrides:
        cfg = cfg.overlay(overrides)
        logger.debug("[config] overrides=%s", dict(overrides))
    return cfg


__all__ = ["load_yaml", "load_game_config"]
