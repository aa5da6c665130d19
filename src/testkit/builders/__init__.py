"""Builder framework public exports."""

from .base import (
    BaseBuilder,
    Builder,
    ConfigurableBuilder,
    SupportsTagging,
    SupportsValidationToggle,
)
from .configuration import BuilderConfig
from .exceptions import (
    AggregateBuildError,
    BuilderError,
    BuilderNotFoundError,
    ConfigurationError,
    FieldValidationError,
    RegistrationError,
    RequiredFieldError,
)
from .factory import (
    BuilderConstructor,
    BuilderFactory,
    create_builder,
    default_factory,
    register_builder,
)
from .result import BuildResult, Failure, Success
from .users import USER_BUILDER_NAME, User, UserBuilder, new_user_builder

__all__ = [
    "USER_BUILDER_NAME",
    "AggregateBuildError",
    "BaseBuilder",
    "BuildResult",
    "Builder",
    "BuilderConfig",
    "BuilderConstructor",
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
    "SupportsTagging",
    "SupportsValidationToggle",
    "User",
    "UserBuilder",
    "create_builder",
    "default_factory",
    "new_user_builder",
    "register_builder",
]
