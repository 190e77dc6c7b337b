# src/tetris_classic/config/game.py
from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator, model_validator

from tetris_classic.config.base import ConfigBase


def _as_int(value: object, *, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where} must be an int, got bool")
    if not isinstance(value, (int, float, str, bytes, bytearray)):
        raise ValueError(f"{where} must be an int-like value, got {type(value)!r}")
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{where} must be an int-like value, got {value!r}") from e


class BoardConfig(ConfigBase):
    width: int = Field(default=10, ge=4)
    height: int = Field(default=18, ge=4)


class ScoringConfig(ConfigBase):
    """Classic doubling scheme: base_points * 2^(rows-1) per anchor."""

    base_points: int = Field(default=100, ge=1)


class GravityConfig(ConfigBase):
    """
    Drop delay as a function of score:

      delay = max(min_ms, initial_ms - step_ms * (score // points_per_step))
    """

    initial_ms: int = Field(default=800, ge=1)
    min_ms: int = Field(default=100, ge=1)
    step_ms: int = Field(default=50, ge=0)
    points_per_step: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def _floor_below_start(self) -> "GravityConfig":
        if self.min_ms > self.initial_ms:
            raise ValueError(f"gravity.min_ms ({self.min_ms}) must be <= gravity.initial_ms ({self.initial_ms})")
        return self


class GameConfig(ConfigBase):
    """
    Construction-time settings for one game session.

    Keep this as the single home for things that conceptually belong to the engine:
      - board geometry
      - scoring and gravity curves
      - RNG seed (None => OS entropy)
    """

    board: BoardConfig = Field(default_factory=BoardConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    gravity: GravityConfig = Field(default_factory=GravityConfig)
    seed: Optional[int] = Field(default=None, ge=0)
    input_queue_size: int = Field(default=64, ge=1)

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_int(cls, v: object) -> Optional[int]:
        if v is None:
            return None
        return _as_int(v, where="game.seed")


__all__ = ["BoardConfig", "ScoringConfig", "GravityConfig", "GameConfig"]
