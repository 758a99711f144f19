from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from gridline.validation import DegenerateLineError, ValidationError

from .raster import bresenham, normalize_rounding, snap
from .rect import Rect
from .vector import Vector2


@dataclass
class Line:
    """A directed segment from ``start`` to ``end``.

    ``bounds`` is computed on first access and then kept for the lifetime of
    the instance. Moving the endpoints afterwards (directly, through
    ``set()`` or through ``invert()``) does not refresh it.
    """

    start: Vector2 = field(default_factory=Vector2)
    end: Vector2 = field(default_factory=Vector2)
    _bounds: Rect | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.start is None:
            self.start = Vector2()
        if self.end is None:
            self.end = Vector2()

    @classmethod
    def from_points(cls, start: Sequence[float], end: Sequence[float]) -> "Line":
        return cls(Vector2.from_sequence(start), Vector2.from_sequence(end))

    @property
    def bounds(self) -> Rect:
        if self._bounds is None:
            self._bounds = self._calculate_bounds()
        return self._bounds

    def set(self, start: Vector2, end: Vector2) -> None:
        self.start = start
        self.end = end

    def invert(self) -> "Line":
        """Swap the endpoints in place and return the same line."""
        self.start, self.end = self.end, self.start
        return self

    def copy(self) -> "Line":
        return Line(self.start.copy(), self.end.copy())

    def is_degenerate(self) -> bool:
        return self.start == self.end

    def length(self) -> float:
        return self.end.subtract(self.start).magnitude()

    def get_center(self) -> Vector2:
        offset = self.end.subtract(self.start)
        return self.start.add(offset.divide(2))

    def get_normal(self, on_degenerate: str = "raise") -> Vector2:
        """Return the unit vector perpendicular to the line.

        A zero-length line has no direction. ``on_degenerate`` decides the
        outcome: ``"raise"`` raises :class:`DegenerateLineError`, ``"zero"``
        warns and returns a zero vector.
        """

        direction = self.end.subtract(self.start)
        if direction.magnitude() == 0:
            if on_degenerate == "zero":
                warnings.warn("Line has zero length; its normal is the zero vector.", RuntimeWarning)
                return Vector2()
            if on_degenerate != "raise":
                raise ValidationError(f"Unknown degenerate normal policy {on_degenerate!r}; expected 'raise' or 'zero'.")
            raise DegenerateLineError("Cannot compute the normal of a zero-length line.")
        return direction.perp().normalize()

    def rasterize(self, rounding: str = "nearest") -> List[Vector2]:
        """Return the Bresenham grid points from start to end, inclusive.

        Endpoints are snapped to integers first using ``rounding``
        (``"nearest"``, ``"floor"`` or ``"truncate"``). A fresh list is built
        on every call.
        """

        mode = self._resolve_rounding(rounding)
        x0, y0 = snap(self.start.x, mode), snap(self.start.y, mode)
        x1, y1 = snap(self.end.x, mode), snap(self.end.y, mode)
        return [Vector2(x, y) for x, y in bresenham(x0, y0, x1, y1)]

    def rasterize_array(self, rounding: str = "nearest") -> np.ndarray:
        pts = self.rasterize(rounding)
        return np.array([[p.x, p.y] for p in pts], dtype=int).reshape(-1, 2)

    def _resolve_rounding(self, rounding: str) -> str:
        # Unknown names pass through so snap() reports them.
        return normalize_rounding(rounding) or rounding

    def _calculate_bounds(self) -> Rect:
        bounds = Rect()

        if self.start.x < self.end.x:
            bounds.position.x = self.start.x
            bounds.width = self.end.x - self.start.x
        else:
            bounds.position.x = self.end.x
            bounds.width = self.start.x - self.end.x

        if self.start.y < self.end.y:
            bounds.position.y = self.start.y
            bounds.height = self.end.y - self.start.y
        else:
            bounds.position.y = self.end.y
            bounds.height = self.start.y - self.end.y

        return bounds
