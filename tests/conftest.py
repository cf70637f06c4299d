from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from tests.env_helpers import config_env


@pytest.fixture(autouse=True)
def _isolated_config_env():
    with config_env(None):
        yield


@pytest.fixture
def write_config():
    def _write(path: Path, body: str) -> Path:
        path.write_text(body.strip() + "\n", encoding="utf-8")
        return path

    return _write
