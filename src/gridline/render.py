from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from gridline.geometry import Line, Vector2
from gridline.validation import ValidationError

RGBA = Tuple[int, int, int, int]


def normalize_color(color: Sequence[float] | str) -> RGBA:
    """Return an RGBA tuple of 0-255 ints.

    Strings go through Pillow color names. Integer sequences are 0-255
    channels; float sequences are 0-1 channels unless a value exceeds 1, in
    which case they are read as 0-255.
    """

    if isinstance(color, str):
        try:
            rgb = ImageColor.getrgb(color)
        except ValueError as exc:
            raise ValidationError(f"Unknown color {color!r}.") from exc
        alpha = rgb[3] if len(rgb) == 4 else 255
        return rgb[0], rgb[1], rgb[2], alpha

    raw = np.asarray(color)
    if raw.dtype.kind not in "iuf":
        raise ValidationError("Color channels must be numbers.")
    arr = raw.astype(float).flatten()
    if arr.size not in (3, 4):
        raise ValidationError("Color must be RGB or RGBA.")
    if raw.dtype.kind == "f" and arr.max() <= 1.0:
        arr = arr * 255.0
    arr = np.clip(np.rint(arr), 0, 255).astype(int)
    alpha = int(arr[3]) if arr.size == 4 else 255
    return int(arr[0]), int(arr[1]), int(arr[2]), alpha


def _points_array(points: Iterable[Vector2] | np.ndarray) -> np.ndarray:
    if isinstance(points, np.ndarray):
        arr = points
    else:
        arr = np.array([[p.x, p.y] for p in points], dtype=float)
    try:
        arr = np.asarray(arr, dtype=float).reshape(-1, 2)
    except ValueError as exc:
        raise ValidationError("Points must be an Nx2 array or a sequence of vectors.") from exc
    if not np.all(np.isfinite(arr)) or not np.array_equal(arr, np.floor(arr)):
        raise ValidationError("Points must lie on the integer grid; rasterize or snap them first.")
    return arr.astype(int)


def render_points(
    points: Iterable[Vector2] | np.ndarray,
    size: Tuple[int, int] | None = None,
    scale: int = 1,
    color: Sequence[float] | str = "black",
    background: Sequence[float] | str = "white",
    origin: Tuple[int, int] | None = None,
) -> Image.Image:
    """Paint grid points into an RGBA image, one ``scale``-sized block per point."""

    if scale < 1:
        raise ValidationError("scale must be at least 1.")
    pts = _points_array(points)

    if origin is None:
        origin = (int(pts[:, 0].min()), int(pts[:, 1].min())) if pts.shape[0] else (0, 0)
    if size is None:
        if pts.shape[0] == 0:
            raise ValidationError("render_points needs at least one point when size is not given.")
        size = (
            int(pts[:, 0].max()) - origin[0] + 1,
            int(pts[:, 1].max()) - origin[1] + 1,
        )
    width, height = size
    if width <= 0 or height <= 0:
        raise ValidationError("Image size must be positive.")

    image = Image.new("RGBA", (width * scale, height * scale), normalize_color(background))
    draw = ImageDraw.Draw(image)
    fill = normalize_color(color)
    for x, y in pts - np.asarray(origin, dtype=int):
        if not (0 <= x < width and 0 <= y < height):
            continue
        left, top = int(x) * scale, int(y) * scale
        draw.rectangle([left, top, left + scale - 1, top + scale - 1], fill=fill)
    return image


def render_line(line: Line, rounding: str = "nearest", **kwargs) -> Image.Image:
    return render_points(line.rasterize(rounding), **kwargs)
