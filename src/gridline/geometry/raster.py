from __future__ import annotations

import math
from typing import Iterator, Literal

from gridline.validation import ValidationError, require_finite

RoundingMode = Literal["nearest", "floor", "truncate"]
ROUNDING_MODES: tuple[str, ...] = ("nearest", "floor", "truncate")
_ROUNDING_ALIASES = {
    "nearest": "nearest",
    "round": "nearest",
    "floor": "floor",
    "truncate": "truncate",
    "trunc": "truncate",
    "int": "truncate",
}


def normalize_rounding(value: str) -> str | None:
    return _ROUNDING_ALIASES.get(value.strip().lower())


def snap(value: float, rounding: RoundingMode = "nearest") -> int:
    """Convert a coordinate to a grid integer.

    ``nearest`` rounds halves away from zero, ``floor`` rounds toward
    negative infinity and ``truncate`` drops the fractional part.
    """

    number = require_finite(value, "coordinate")
    if rounding == "nearest":
        magnitude = abs(number)
        whole = math.floor(magnitude)
        # magnitude - whole is exact for doubles; adding 0.5 first is not.
        if magnitude - whole >= 0.5:
            whole += 1
        return -whole if number < 0 else whole
    if rounding == "floor":
        return math.floor(number)
    if rounding == "truncate":
        return math.trunc(number)
    raise ValidationError(f"Unknown rounding mode {rounding!r}; expected one of {', '.join(ROUNDING_MODES)}.")


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the grid points from (x0, y0) to (x1, y1), both ends included.

    Uses the integer error-term variant with ``e2 = 2 * err``. Termination
    relies on every coordinate being an int, so callers snap first.
    """

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    x, y = x0, y0
    while True:
        yield x, y

        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
