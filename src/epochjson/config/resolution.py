from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class LogLevelDecision:
    name: str
    value: int


def resolve_log_level(
    cli_level: str | None,
    config_level: str | None,
    *,
    fallback: str = "WARNING",
) -> LogLevelDecision:
    """Pick the CLI flag over the config file, then the fallback."""
    for level in (cli_level, config_level, fallback):
        name = (level or "").strip().upper()
        value = logging.getLevelName(name) if name else None
        if isinstance(value, int):
            return LogLevelDecision(name=name, value=value)
    return LogLevelDecision(name="WARNING", value=logging.WARNING)
