"""Explicit wiring of builder factories."""

from __future__ import annotations

import logging

from testkit.builders import USER_BUILDER_NAME, BuilderFactory, default_factory, new_user_builder
from testkit.config import AppSettings


def register_builtin_builders(factory: BuilderFactory) -> BuilderFactory:
    """Register the builders bundled with testkit on ``factory``."""

    factory.register(USER_BUILDER_NAME, new_user_builder)
    return factory


def build_factory(
    settings: AppSettings | None = None,
    *,
    logger: logging.Logger | None = None,
) -> BuilderFactory:
    """Construct a private factory, independent of the process-wide default."""

    resolved_settings = settings or AppSettings.from_env()
    resolved_logger = logger or logging.getLogger(__name__)
    factory = BuilderFactory(logger=logger)
    if resolved_settings.register_builtins:
        register_builtin_builders(factory)
    else:
        resolved_logger.info(
            "Built-in builders disabled for environment %s", resolved_settings.environment
        )
    return factory


def init_default_factory(
    settings: AppSettings | None = None,
    *,
    logger: logging.Logger | None = None,
) -> BuilderFactory:
    """Populate the process-wide default factory; call once at start-up."""

    resolved_settings = settings or AppSettings.from_env()
    resolved_logger = logger or logging.getLogger(__name__)
    if resolved_settings.register_builtins:
        register_builtin_builders(default_factory)
    resolved_logger.debug(
        "Default factory initialised with %s",
        ", ".join(sorted(default_factory.get_registered_names())) or "no builders",
    )
    return default_factory


__all__ = ["build_factory", "init_default_factory", "register_builtin_builders"]
