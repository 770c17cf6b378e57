"""Environment-driven settings.

Recognised variables:

- ``CHESSRULES_LOG_LEVEL``: logging level name for the CLI (default WARNING).
- ``CHESSRULES_START_FEN``: position used when ``--fen`` is not given.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from chessrules.core.notation import STARTING_FEN

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_log_level(name: str) -> int:
    level = name.strip().upper()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {name!r}")
    return getattr(logging, level)


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    start_fen: str = STARTING_FEN


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    level_name = env.get("CHESSRULES_LOG_LEVEL")
    return Settings(
        log_level=parse_log_level(level_name) if level_name else logging.WARNING,
        start_fen=env.get("CHESSRULES_START_FEN") or STARTING_FEN,
    )
