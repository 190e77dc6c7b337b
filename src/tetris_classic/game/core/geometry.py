# src/tetris_classic/game/core/geometry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class Vector:
    """Integer 2D vector. x grows to the right, y grows downwards (row 0 is the top)."""

    x: int
    y: int

    def plus(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def minus(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def equals(self, other: "Vector") -> bool:
        return self == other

    __add__ = plus
    __sub__ = minus


VectorSet = FrozenSet[Vector]

ORIGIN = Vector(0, 0)
LEFT = Vector(-1, 0)
RIGHT = Vector(1, 0)
DOWN = Vector(0, 1)


def vector_set(*points: tuple[int, int]) -> VectorSet:
    return frozenset(Vector(int(x), int(y)) for x, y in points)


__all__ = ["Vector", "VectorSet", "ORIGIN", "LEFT", "RIGHT", "DOWN", "vector_set"]
