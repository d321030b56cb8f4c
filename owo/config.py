from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_PROMPT = ">>> "
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get('OWO_PROMPT', _DEFAULT_PROMPT)


def get_recursion_limit() -> Optional[int]:
    """Recursion limit to apply to the interpreter, or None to keep Python's."""
    raw = os.environ.get('OWO_RECURSION_LIMIT')
    if not raw or not raw.strip():
        return None
    try:
        limit = int(raw.strip())
    except ValueError:
        raise ValueError(f"OWO_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"OWO_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> int:
    raw = os.environ.get('OWO_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
