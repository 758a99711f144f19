from __future__ import annotations

import numpy as np
import pytest

from gridline.geometry import Line, Vector2
from gridline.render import normalize_color, render_line, render_points
from gridline.validation import ValidationError


def test_normalize_color_variants():
    assert normalize_color("red") == (255, 0, 0, 255)
    assert normalize_color((0.0, 1.0, 0.0)) == (0, 255, 0, 255)
    assert normalize_color((10, 20, 30, 128)) == (10, 20, 30, 128)


def test_normalize_color_int_channels_are_0_255():
    assert normalize_color((1, 1, 1)) == (1, 1, 1, 255)
    assert normalize_color(np.array([0, 0, 1], dtype=np.uint8)) == (0, 0, 1, 255)
    assert normalize_color((1.0, 1.0, 1.0)) == (255, 255, 255, 255)


def test_normalize_color_invalid():
    with pytest.raises(ValidationError):
        normalize_color("not-a-color")
    with pytest.raises(ValidationError):
        normalize_color((1.0, 0.0))


def test_render_line_fits_extent():
    line = Line(Vector2(0, 0), Vector2(3, 1))
    image = render_line(line, color="black", background="white")
    assert image.size == (4, 2)
    arr = np.asarray(image)
    assert tuple(arr[0, 0]) == (0, 0, 0, 255)
    assert tuple(arr[1, 3]) == (0, 0, 0, 255)
    assert tuple(arr[1, 0]) == (255, 255, 255, 255)


def test_render_points_scale_and_origin():
    points = [Vector2(5, 5), Vector2(6, 6)]
    image = render_points(points, scale=3)
    assert image.size == (6, 6)
    arr = np.asarray(image)
    assert tuple(arr[2, 2]) == (0, 0, 0, 255)
    assert tuple(arr[0, 5]) == (255, 255, 255, 255)


def test_render_points_skips_outside_canvas():
    image = render_points(np.array([[0, 0], [10, 10]]), size=(2, 2), origin=(0, 0))
    arr = np.asarray(image)
    assert arr.shape == (2, 2, 4)
    assert tuple(arr[0, 0]) == (0, 0, 0, 255)
    assert tuple(arr[1, 1]) == (255, 255, 255, 255)


def test_render_points_requires_size_or_points():
    with pytest.raises(ValidationError):
        render_points([])
    blank = render_points([], size=(3, 2))
    assert blank.size == (3, 2)


def test_render_points_invalid_scale():
    with pytest.raises(ValidationError):
        render_points([Vector2(0, 0)], scale=0)


def test_render_points_rejects_off_grid_arrays():
    with pytest.raises(ValidationError):
        render_points(np.array([[-0.5, 0.0], [1.0, 1.0]]))
    with pytest.raises(ValidationError):
        render_points([Vector2(0.25, 0.0)])


def test_render_points_accepts_integral_floats():
    image = render_points(np.array([[-1.0, 0.0], [0.0, 0.0]]))
    assert image.size == (2, 1)
