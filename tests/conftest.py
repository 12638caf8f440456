from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DECLLANG_STRIP_COMMENTS", "DECLLANG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
