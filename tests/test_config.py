from __future__ import annotations

import pytest

from decllang import config
from decllang.config import FrontendSettings, load_settings


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "load_env", lambda: None)


def test_defaults() -> None:
    assert load_settings() == FrontendSettings(strip_comments=True, log_level="WARNING")


@pytest.mark.parametrize("raw,expected", [("0", False), ("off", False), ("YES", True), (" ", True)])
def test_strip_comments_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("DECLLANG_STRIP_COMMENTS", raw)
    assert load_settings().strip_comments is expected


def test_strip_comments_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECLLANG_STRIP_COMMENTS", "maybe")
    with pytest.raises(ValueError, match="DECLLANG_STRIP_COMMENTS"):
        load_settings()


def test_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECLLANG_LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"
    monkeypatch.setenv("DECLLANG_LOG_LEVEL", "loud")
    with pytest.raises(ValueError, match="logging level"):
        load_settings()


def test_load_env_reads_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.undo()
    (tmp_path / ".env").write_text("DECLLANG_LOG_LEVEL=ERROR\n", encoding="utf-8")
    monkeypatch.delenv("DECLLANG_LOG_LEVEL", raising=False)
    monkeypatch.setattr(config, "repo_root", lambda: tmp_path)
    assert load_settings().log_level == "ERROR"
