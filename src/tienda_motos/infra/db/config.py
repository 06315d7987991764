from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PoolSettings:
    size: int
    max_overflow: int
    recycle_seconds: int


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def pool_settings() -> PoolSettings:
    """Connection pool sizing, overridable per deployment."""
    return PoolSettings(
        size=_int_env("DB_POOL_SIZE", 5),
        max_overflow=_int_env("DB_MAX_OVERFLOW", 10),
        recycle_seconds=_int_env("DB_POOL_RECYCLE_SECONDS", 1800),
    )
