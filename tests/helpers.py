from __future__ import annotations

import json
from pathlib import Path


def as_tuples(points) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in points]


def write_config(home: Path, **values) -> Path:
    home.mkdir(parents=True, exist_ok=True)
    path = home / "gridline.cfg"
    path.write_text(json.dumps(values))
    return path
