from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vector2


@dataclass
class Rect:
    """Axis-aligned box anchored at its top-left (minimum) corner."""

    position: Vector2 = field(default_factory=Vector2)
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.position.x + self.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.height

    @property
    def size(self) -> tuple[float, float]:
        return self.width, self.height

    def contains(self, point: Vector2) -> bool:
        return self.position.x <= point.x <= self.right and self.position.y <= point.y <= self.bottom

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.position.x, self.position.y, self.width, self.height
