"""
Test configuration and shared fixtures.

The midsize jet parameter table in data/ is the reference aircraft for
unit and integration tests.
"""

from pathlib import Path
from typing import Callable

import pytest

from aeroweight.core.parameters import ParameterSet, load_parameters


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
JET_CSV = DATA_DIR / "midsize_jet.csv"

# Design point of the reference aircraft
JET_W_DG = 84350.0
JET_N_Z = 3.75


@pytest.fixture
def jet_csv() -> Path:
    """Path to the midsize jet parameter table."""
    return JET_CSV


@pytest.fixture
def jet_parameters() -> ParameterSet:
    """Midsize jet parameters loaded through the CSV loader."""
    return load_parameters(JET_CSV)


@pytest.fixture
def write_csv(tmp_path) -> Callable[..., Path]:
    """
    Factory writing a parameter CSV into tmp_path.

    Usage:
        path = write_csv({"s_w": 1000.0})
        path = write_csv("s_w,abc\\n", name="bad.csv")
    """
    def _write(content, name: str = "params.csv") -> Path:
        path = tmp_path / name
        if isinstance(content, dict):
            lines = ["symbol,value"] + [f"{k},{v!r}" for k, v in content.items()]
            content = "\n".join(lines) + "\n"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests independent of AEROWEIGHT_* variables and config files."""
    import os
    import aeroweight.bootstrap.config as config_module

    for key in list(os.environ):
        if key.startswith("AEROWEIGHT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_config", None)
