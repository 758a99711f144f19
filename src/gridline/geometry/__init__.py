"""Geometry primitives: vectors, boxes, segments and grid rasterization."""

from __future__ import annotations

from .vector import Vector2
from .rect import Rect
from .raster import ROUNDING_MODES, bresenham, normalize_rounding, snap
from .line import Line

__all__ = [
    "Vector2",
    "Rect",
    "Line",
    "bresenham",
    "snap",
    "normalize_rounding",
    "ROUNDING_MODES",
]
