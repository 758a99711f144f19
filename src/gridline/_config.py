from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from gridline.geometry.raster import normalize_rounding

HOME_ENV_VAR = "GRIDLINE_HOME"
CONFIG_FILENAME = "gridline.cfg"
DEFAULT_CONFIG = {
    "_comment": "rounding: nearest (default), floor, truncate. degenerate_normal: raise (default), zero.",
    "rounding": "nearest",
    "degenerate_normal": "raise",
}
_NORMAL_POLICIES = ("raise", "zero")


@dataclass(frozen=True)
class RasterSettings:
    """Resolved settings from gridline.cfg."""

    rounding: str
    degenerate_normal: str


def config_dir() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".gridline"


def config_file() -> Path:
    return config_dir() / CONFIG_FILENAME


def ensure_user_config() -> None:
    """Ensure gridline.cfg exists with sane defaults."""

    directory = config_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    path = directory / CONFIG_FILENAME
    if path.exists():
        return

    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(config_file().read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def _normalize_policy(value: str) -> str | None:
    key = value.strip().lower()
    return key if key in _NORMAL_POLICIES else None


def get_raster_settings() -> RasterSettings:
    """Return the configured rounding mode and zero-length normal policy."""

    raw_config = _load_user_config()
    rounding = normalize_rounding(str(raw_config.get("rounding", DEFAULT_CONFIG["rounding"])))
    if rounding is None:
        rounding = DEFAULT_CONFIG["rounding"]

    policy = _normalize_policy(str(raw_config.get("degenerate_normal", DEFAULT_CONFIG["degenerate_normal"])))
    if policy is None:
        policy = DEFAULT_CONFIG["degenerate_normal"]

    return RasterSettings(rounding=rounding, degenerate_normal=policy)
