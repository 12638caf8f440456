from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def repo_root() -> Path:
    # Project root is the directory that contains the `decllang/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0/true/false/yes/no/on/off), got {raw!r}")


def parse_log_level(raw: str | None) -> str:
    level = (raw or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"not a logging level: {raw!r}")
    return level


@dataclass(frozen=True)
class FrontendSettings:
    strip_comments: bool
    log_level: str


def load_settings() -> FrontendSettings:
    load_env()
    return FrontendSettings(
        strip_comments=_parse_bool(
            "DECLLANG_STRIP_COMMENTS", os.getenv("DECLLANG_STRIP_COMMENTS"), True
        ),
        log_level=parse_log_level(os.getenv("DECLLANG_LOG_LEVEL")),
    )
