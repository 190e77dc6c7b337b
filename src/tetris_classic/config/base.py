# src/tetris_classic/config/base.py
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ConfigBase")


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursive dict merge; override wins, nested mappings are merged key by key."""
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), Mapping):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class ConfigBase(BaseModel):
    """Strict, immutable settings model: unknown keys are errors."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def overlay(self: T, overrides: Mapping[str, Any]) -> T:
        """Validated copy with `overrides` deep-merged over the current values."""
        if not overrides:
            return self
        merged = deep_merge(self.model_dump(), overrides)
        return type(self).model_validate(merged)


__all__ = ["ConfigBase", "deep_merge"]
