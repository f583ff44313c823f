"""Environment-driven settings for the Briefly backend.

All values are read lazily so tests can patch the environment. `.env` is
loaded once in `briefly.main`.
"""

from __future__ import annotations

import os
from typing import List

_DEFAULT_LATENCY_SECONDS = 2.0
_DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",      # Next.js dev server
    "http://127.0.0.1:3000",      # Alternative localhost
    "http://localhost:8080",      # Vite dev server
]


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


def _env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).strip().lower() == "true"


def _env_list(key: str) -> List[str]:
    raw = os.getenv(key)
    if not raw:
        return []
    values: List[str] = []
    for item in raw.split(","):
        cleaned = item.strip()
        if cleaned and cleaned not in values:
            values.append(cleaned)
    return values


def get_simulated_latency() -> float:
    """Seconds the scope generator waits to mimic model latency (never negative)."""
    return max(0.0, _env_float("SCOPE_SIMULATED_LATENCY_SECONDS", _DEFAULT_LATENCY_SECONDS))


def get_cors_origins() -> List[str]:
    return _env_list("CORS_ORIGINS") or list(_DEFAULT_CORS_ORIGINS)


def is_debug() -> bool:
    return _env_bool("DEBUG", False)
