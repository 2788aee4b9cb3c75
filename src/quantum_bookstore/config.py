"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc


def _default(value: int | None, fallback: int) -> int:
    return fallback if value is None else value


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if level not in logging.getLevelNamesMapping():
        msg = f"{name} must be a logging level name, got {level!r}"
        raise ValueError(msg)
    return level


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    store_name: str = "Quantum Book Store"
    log_level: str = "INFO"
    current_year: int | None = None
    default_max_age: int = 3

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("QUANTUM_BOOKSTORE_ENV", cls.environment),
            store_name=os.getenv("QUANTUM_BOOKSTORE_NAME", cls.store_name),
            log_level=_env_log_level("QUANTUM_BOOKSTORE_LOG_LEVEL", cls.log_level),
            current_year=_env_int("QUANTUM_BOOKSTORE_CURRENT_YEAR"),
            default_max_age=_default(_env_int("QUANTUM_BOOKSTORE_MAX_AGE"), cls.default_max_age),
        )


__all__ = ["AppSettings"]
