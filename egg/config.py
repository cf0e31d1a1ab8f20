from __future__ import annotations
import logging
import os
from typing import Optional


def _env_value(var: str) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def get_log_level() -> int:
    """Log level from LOGLEVEL, defaulting to WARNING when unset or unknown."""
    raw = _env_value('LOGLEVEL')
    if raw:
        level = getattr(logging, raw.upper(), None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def get_recursion_limit() -> Optional[int]:
    # None leaves the interpreter default untouched
    raw = _env_value('EGG_RECURSION_LIMIT')
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"EGG_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"EGG_RECURSION_LIMIT must be positive, got {limit}")
    return limit
