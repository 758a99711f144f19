"""Rasterize a short segment and save it as an image."""

from __future__ import annotations

from pathlib import Path

from gridline import Line, Vector2
from gridline.render import render_line


def build() -> Line:
    """A shallow segment that exercises both stepping axes."""

    return Line(Vector2(0, 0), Vector2(12, 5))


if __name__ == "__main__":
    line = build()
    print("Length:", round(line.length(), 3))
    print("Center:", tuple(line.get_center()))
    print("Bounds:", line.bounds.as_tuple())
    points = line.rasterize()
    print("Grid points:", len(points))
    output = Path("hello_line.png")
    render_line(line, scale=8, color="steelblue").save(output)
    print("Wrote", output)
