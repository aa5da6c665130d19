"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        return default
    return level


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    register_builtins: bool = True

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("TESTKIT_ENV", cls.environment),
            log_level=_env_log_level("TESTKIT_LOG_LEVEL", cls.log_level),
            register_builtins=_env_bool("TESTKIT_REGISTER_BUILTINS", True),
        )


__all__ = ["AppSettings"]
