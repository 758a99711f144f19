"""gridline – 2D line segments and their integer-grid rasterization."""

from __future__ import annotations

from .geometry import Line, Rect, Vector2
from .validation import DegenerateLineError, ValidationError

__all__ = [
    "__version__",
    "Line",
    "Rect",
    "Vector2",
    "ValidationError",
    "DegenerateLineError",
]

__version__ = "0.1.0"
