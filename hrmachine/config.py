from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_CYCLE_LIMIT = 1000
DEFAULT_LOG_LEVEL = "WARNING"


def repo_root() -> Path:
    # Project root is the directory that contains the `hrmachine/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class MachineSettings:
    cycle_limit: int = DEFAULT_CYCLE_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL


def _int_from_env(name: str, *, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


def load_settings() -> MachineSettings:
    load_env()
    return MachineSettings(
        cycle_limit=_int_from_env("HRM_CYCLE_LIMIT", default=DEFAULT_CYCLE_LIMIT),
        log_level=(os.getenv("HRM_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )
