"""Geometric primitives used throughout the resolver."""

from __future__ import annotations
import math
from typing import Sequence

from pydantic import BaseModel, ConfigDict


EPSILON = 1e-6  # Endpoint matching tolerance in canonical units (mm)


class Vec2(BaseModel):
    """Point or vector on the plan, in canonical millimeters."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float

    @classmethod
    def of(cls, pair: Sequence[float] | Vec2) -> Vec2:
        if isinstance(pair, Vec2):
            return pair
        x, y = pair
        return cls(x=float(x), y=float(y))

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def perpendicular(self) -> Vec2:
        """90-degree counterclockwise rotation (left-hand normal)."""
        return Vec2(x=-self.y, y=self.x)

    def cross(self, other: Vec2) -> float:
        return self.x * other.y - self.y * other.x

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def near(self, other: Vec2, eps: float = EPSILON) -> bool:
        """Per-axis match within eps."""
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(x=self.x * scalar, y=self.y * scalar)


# Ordered vertex list; closing vertex is never repeated.
Polygon = list[Vec2]


def direction_from_points(start: Vec2, end: Vec2) -> Vec2:
    """Get direction vector from start to end."""
    return end - start
