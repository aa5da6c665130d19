"""Shared CLI dependency helpers."""

from __future__ import annotations

import logging
from functools import lru_cache

from testkit.builders import BuilderFactory
from testkit.config import AppSettings
from testkit.container import build_factory


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    settings = AppSettings.from_env()
    logging.basicConfig(level=settings.log_level)
    return settings


@lru_cache(maxsize=1)
def get_factory() -> BuilderFactory:
    """Return a cached factory for CLI commands."""

    return build_factory(get_settings())


def reset_dependencies() -> None:
    """Clear the cached settings and factory (useful for tests)."""

    get_factory.cache_clear()
    get_settings.cache_clear()
