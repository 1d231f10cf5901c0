# tests/conftest.py
import importlib
from pathlib import Path

import pytest

from hangul_cyr.services.line_processor import LineProcessor


@pytest.fixture(scope="module")
def main_module():
    return importlib.import_module("main")


@pytest.fixture
def processor() -> LineProcessor:
    return LineProcessor()


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """A settings.yaml location that never touches the real project file."""
    return tmp_path / "settings.yaml"
