from __future__ import annotations

from pathlib import Path

import pytest

from gridline._config import HOME_ENV_VAR


@pytest.fixture(autouse=True)
def gridline_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config lookup at a throwaway directory."""
    home = tmp_path / "gridline-home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    return home
