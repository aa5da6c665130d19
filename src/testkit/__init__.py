"""Declarative test data builders.

A :class:`~testkit.builders.BaseBuilder` carries tags, a validation flag and
accumulated errors; concrete builders such as
:class:`~testkit.builders.UserBuilder` add validating setters and return a
:class:`~testkit.builders.Success` or :class:`~testkit.builders.Failure` from
``build``. Builders can be created by name from a
:class:`~testkit.builders.BuilderFactory` and configured in bulk with a
:class:`~testkit.builders.BuilderConfig`.

Builders are not thread-safe; give each unit of work its own instance, using
``clone`` where needed.
"""

from testkit.builders import (
    AggregateBuildError,
    BaseBuilder,
    Builder,
    BuilderConfig,
    BuilderError,
    BuilderFactory,
    BuilderNotFoundError,
    BuildResult,
    ConfigurableBuilder,
    ConfigurationError,
    Failure,
    FieldValidationError,
    RegistrationError,
    RequiredFieldError,
    Success,
    User,
    UserBuilder,
    create_builder,
    default_factory,
    register_builder,
)
from testkit.container import build_factory, init_default_factory

__all__ = [
    "AggregateBuildError",
    "BaseBuilder",
    "BuildResult",
    "Builder",
    "BuilderConfig",
    "BuilderError",
    "BuilderFactory",
    "BuilderNotFoundError",
    "ConfigurableBuilder",
    "ConfigurationError",
    "Failure",
    "FieldValidationError",
    "RegistrationError",
    "RequiredFieldError",
    "Success",
    "User",
    "UserBuilder",
    "build_factory",
    "create_builder",
    "default_factory",
    "init_default_factory",
    "register_builder",
]
