from __future__ import annotations

import math

import pytest

from gridline.geometry.raster import bresenham, normalize_rounding, snap
from gridline.validation import ValidationError


def test_bresenham_shallow_slope():
    assert list(bresenham(0, 0, 2, 1)) == [(0, 0), (1, 0), (2, 1)]


def test_bresenham_steep_negative_slope():
    assert list(bresenham(0, 0, -1, -3)) == [(0, 0), (0, -1), (-1, -2), (-1, -3)]


def test_bresenham_single_point():
    assert list(bresenham(4, -2, 4, -2)) == [(4, -2)]


@pytest.mark.parametrize(
    "x0, y0, x1, y1",
    [(0, 0, 7, 3), (5, 5, -4, 1), (-3, 8, -3, -2), (2, -6, 9, -6), (0, 0, -5, 11)],
)
def test_bresenham_count_endpoints_and_connectivity(x0, y0, x1, y1):
    points = list(bresenham(x0, y0, x1, y1))
    assert len(points) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    assert points[0] == (x0, y0)
    assert points[-1] == (x1, y1)
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert max(abs(bx - ax), abs(by - ay)) == 1


def test_bresenham_is_lazy():
    walker = bresenham(0, 0, 10**9, 1)
    assert next(walker) == (0, 0)
    assert next(walker) == (1, 0)


@pytest.mark.parametrize(
    "value, rounding, expected",
    [
        (2.5, "nearest", 3),
        (-2.5, "nearest", -3),
        (0.4, "nearest", 0),
        (0.49999999999999994, "nearest", 0),
        (-0.49999999999999994, "nearest", 0),
        (-1.5, "nearest", -2),
        (2.0**53 + 2, "nearest", 2**53 + 2),
        (-2.5, "floor", -3),
        (2.9, "floor", 2),
        (-2.5, "truncate", -2),
        (2.9, "truncate", 2),
        (7, "nearest", 7),
    ],
)
def test_snap_modes(value, rounding, expected):
    result = snap(value, rounding)
    assert result == expected
    assert isinstance(result, int)


def test_snap_unknown_mode():
    with pytest.raises(ValidationError):
        snap(1.0, "ceil")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_snap_rejects_non_finite(value):
    with pytest.raises(ValidationError):
        snap(value)


def test_normalize_rounding_aliases():
    assert normalize_rounding("Round") == "nearest"
    assert normalize_rounding(" int ") == "truncate"
    assert normalize_rounding("ceil") is None
