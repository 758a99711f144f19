from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from gridline.validation import require_pair


@dataclass
class Vector2:
    """2D point or direction.

    Fields may be reassigned by the owner, but arithmetic never mutates the
    receiver: every operation below returns a new vector.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_sequence(cls, value: Sequence[float]) -> "Vector2":
        x, y = require_pair(value, "vector")
        return cls(x, y)

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def divide(self, divisor: float) -> "Vector2":
        if divisor == 0:
            raise ValueError("Cannot divide a vector by zero.")
        return Vector2(self.x / divisor, self.y / divisor)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def perp(self) -> "Vector2":
        """Return the vector rotated a quarter turn counter-clockwise."""
        return Vector2(-self.y, self.x)

    def normalize(self) -> "Vector2":
        length = self.magnitude()
        if length == 0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return self.divide(length)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.subtract(other)

    def __mul__(self, factor: float) -> "Vector2":
        return self.scale(factor)

    def __rmul__(self, factor: float) -> "Vector2":
        return self.scale(factor)

    def __truediv__(self, divisor: float) -> "Vector2":
        return self.divide(divisor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
