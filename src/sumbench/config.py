# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Settings loaded from SUMBENCH_* environment variables and env-style files."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from sumbench.errors import ConfigError

PREFIX = "SUMBENCH_"
DEFAULT_ENV_PATH = Path(os.environ.get("SUMBENCH_ENV_FILE", ".env"))
LOG_FORMAT = "[sumbench] %(levelname)s %(message)s"


@dataclass(frozen=True)
class Settings:
    repeat: int = 5
    number: int = 1
    seed: int = 0
    loop_cell_limit: int = 200_000
    rtol: float = 1e-9
    atol: float = 1e-6
    log_level: str = "WARNING"

    def as_env(self) -> Dict[str, str]:
        return {f"{PREFIX}{key.upper()}": str(value) for key, value in asdict(self).items()}


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise ValueError("must be >= 1")
    return value


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise ValueError("must be >= 0")
    return value


def _non_negative_float(raw: str) -> float:
    value = float(raw)
    if value < 0:
        raise ValueError("must be >= 0")
    return value


def parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown level {raw!r}")
    return level


PARSERS: Dict[str, Callable[[str], object]] = {
    "repeat": _positive_int,
    "number": _positive_int,
    "seed": _non_negative_int,
    "loop_cell_limit": _non_negative_int,
    "rtol": _non_negative_float,
    "atol": _non_negative_float,
    "log_level": parse_log_level,
}


def load_env(path: Path) -> Dict[str, str]:
    """Read ``KEY=value`` lines, ignoring blanks, comments and an ``export`` prefix."""
    env: Dict[str, str] = {}
    if not path.exists():
        return env
    for raw in path.read_text().splitlines():
        line = raw.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        if not sep or line.startswith("#"):
            continue
        env[key.strip()] = value.strip().strip("'\"")
    return env


def load_settings(env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from an env file overlaid by the process environment.

    Process variables win over file entries so a one-off ``SUMBENCH_REPEAT=1``
    on the command line overrides a checked-in ``.env``.
    """
    merged: Dict[str, str] = {}
    if env_file is not None:
        merged.update(load_env(env_file))
    merged.update(os.environ if environ is None else environ)

    values: Dict[str, object] = {}
    for field_name, parser in PARSERS.items():
        key = f"{PREFIX}{field_name.upper()}"
        raw = merged.get(key)
        if raw is None or raw == "":
            continue
        try:
            values[field_name] = parser(raw)
        except ValueError as exc:
            raise ConfigError(f"{key}={raw!r}: {exc}") from exc
    return Settings(**values)


def update_env_var(path: Path, key: str, value: str) -> None:
    """Rewrite every ``key=`` line in ``path`` or append one when none exists."""
    if not path.exists():
        raise FileNotFoundError(f"env file not found: {path}")

    entry = f"{key}={value}"
    lines = path.read_text().splitlines()
    replaced = [entry if line.startswith(f"{key}=") else line for line in lines]
    if not any(line.startswith(f"{key}=") for line in lines):
        replaced.append(entry)
    path.write_text("\n".join(replaced) + "\n")


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("sumbench")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False
