"""Named registry of builder constructors."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .base import Builder
from .exceptions import BuilderNotFoundError, RegistrationError

BuilderConstructor = Callable[[], Builder]


class BuilderFactory:
    """Maps builder names to zero-argument constructors."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._constructors: dict[str, BuilderConstructor] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, name: str, constructor: BuilderConstructor | None) -> None:
        """Register ``constructor`` under ``name``, replacing any previous entry."""

        if not name:
            msg = "builder name cannot be empty"
            raise RegistrationError(msg)
        if constructor is None or not callable(constructor):
            msg = f"builder constructor for {name!r} must be callable"
            raise RegistrationError(msg)
        if name in self._constructors:
            self._logger.debug("Overwriting builder registration %r", name)
        self._constructors[name] = constructor
        self._logger.debug("Registered builder %r", name)

    def unregister(self, name: str) -> None:
        try:
            del self._constructors[name]
        except KeyError as exc:
            msg = f"builder {name!r} not registered"
            raise BuilderNotFoundError(msg) from exc

    def create(self, name: str) -> Builder:
        """Return a fresh builder from the constructor registered as ``name``."""

        try:
            constructor = self._constructors[name]
        except KeyError as exc:
            msg = f"builder {name!r} not registered"
            raise BuilderNotFoundError(msg) from exc
        self._logger.debug("Creating builder %r", name)
        return constructor()

    def is_registered(self, name: str) -> bool:
        return name in self._constructors

    def get_registered_names(self) -> frozenset[str]:
        return frozenset(self._constructors)


# Starts empty; populated by testkit.container.init_default_factory().
default_factory = BuilderFactory()


def register_builder(name: str, constructor: BuilderConstructor | None) -> None:
    """Register a builder on the default factory."""

    default_factory.register(name, constructor)


def create_builder(name: str) -> Builder:
    """Create a builder from the default factory."""

    return default_factory.create(name)


__all__ = [
    "BuilderConstructor",
    "BuilderFactory",
    "create_builder",
    "default_factory",
    "register_builder",
]
