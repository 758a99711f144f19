from __future__ import annotations

import math
from typing import Sequence

import numpy as np


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


class DegenerateLineError(ValidationError):
    """Raised when a query needs a direction but the line has zero length."""


def require_pair(value: Sequence[float], label: str) -> tuple[float, float]:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise ValidationError(f"{label} must be a 2D coordinate.") from exc
    return float(arr[0]), float(arr[1])


def require_finite(value: float, label: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValidationError(f"{label} must be finite.")
    return number
