"""Environment-driven settings for the locale sync server.

Every setting is read once at import time. Malformed numeric values fall
back to their defaults instead of failing server start-up.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, TypeVar

T = TypeVar("T", int, float)

_TRUTHY = {"1", "true", "yes", "y", "on"}


def _env_str(*names: str, default: str = "") -> str:
    """First non-empty value among `names`, stripped."""
    for name in names:
        raw = (os.environ.get(name) or "").strip()
        if raw:
            return raw
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_number(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    return _env_number(name, default, int)


def _env_float(name: str, default: float) -> float:
    return _env_number(name, default, float)


# Locale files are discovered and written only below this directory
PROJECT_ROOT = Path(_env_str("PROJECT_ROOT", default=".")).resolve()
PHRASE_CONFIG_FILE = _env_str("PHRASE_CONFIG_FILE", default=".phraseapp.yml")

HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# Phrase API; the legacy PHRASEAPP_* token name is still honoured
PHRASE_API_BASE_URL = _env_str("PHRASE_API_BASE_URL", default="https://api.phrase.com/v2")
PHRASE_ACCESS_TOKEN = _env_str("PHRASE_ACCESS_TOKEN", "PHRASEAPP_ACCESS_TOKEN")
PHRASE_TIMEOUT = _env_float("PHRASE_TIMEOUT", 30.0)

PULL_TIMEOUT_MINUTES = _env_int("PULL_TIMEOUT_MINUTES", 30)
RATE_LIMIT_MAX_SLEEP = _env_int("RATE_LIMIT_MAX_SLEEP", 300)

# stderr only; stdout belongs to the stdio transport
LOG_LEVEL = _env_str("LOG_LEVEL", default="INFO").upper()
