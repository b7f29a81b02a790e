"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from seabattle.core.fleet import DEFAULT_MAX_ATTEMPTS_PER_SHIP, DEFAULT_MAX_RESTARTS


class WindowMode(StrEnum):
    """Initial window presentation."""

    WINDOWED = "windowed"
    MAXIMIZED = "maximized"
    FULLSCREEN = "fullscreen"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Runtime settings resolved from the process environment."""

    log_level: str = "INFO"
    log_format: str = "text"
    max_attempts_per_ship: int = DEFAULT_MAX_ATTEMPTS_PER_SHIP
    max_restarts: int = DEFAULT_MAX_RESTARTS
    window_mode: WindowMode = WindowMode.WINDOWED

    @classmethod
    def from_env(cls) -> AppConfig:
        """Read settings from env vars, falling back to defaults on bad values."""
        level = os.getenv("SEABATTLE_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).strip().upper() or "INFO"
        log_format = os.getenv("LOG_FORMAT", "text").strip().lower()
        if log_format not in {"text", "json"}:
            log_format = "text"
        return cls(
            log_level=level,
            log_format=log_format,
            max_attempts_per_ship=_positive_int("SEABATTLE_MAX_ATTEMPTS_PER_SHIP", DEFAULT_MAX_ATTEMPTS_PER_SHIP),
            max_restarts=_positive_int("SEABATTLE_MAX_RESTARTS", DEFAULT_MAX_RESTARTS),
            window_mode=_window_mode(os.getenv("SEABATTLE_WINDOW", "")),
        )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env.app
    4) .env.app.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env.app",
            ".env.app.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _window_mode(raw: str) -> WindowMode:
    try:
        return WindowMode(raw.strip().lower())
    except ValueError:
        return WindowMode.WINDOWED


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # IDE run configs may start from a different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / path
