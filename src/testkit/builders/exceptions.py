"""Builder-specific exceptions."""

from __future__ import annotations

from collections.abc import Iterable


class BuilderError(RuntimeError):
    """Base class for builder, factory and configuration failures."""


class FieldValidationError(BuilderError):
    """Recorded by a setter when a supplied value violates a field precondition."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class AggregateBuildError(BuilderError):
    """Returned by ``build`` when the builder accumulated validation errors."""

    def __init__(self, entity: str, errors: Iterable[BaseException]) -> None:
        self.entity = entity
        self.errors = tuple(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"cannot build {entity} due to validation errors: [{details}]")


class RequiredFieldError(BuilderError):
    """Returned by ``build`` when a mandatory field was never set."""

    def __init__(self, entity: str, field: str) -> None:
        super().__init__(f"{entity} {field} is required")
        self.entity = entity
        self.field = field


class RegistrationError(BuilderError, ValueError):
    """Raised when a builder constructor cannot be registered."""


class BuilderNotFoundError(BuilderError, LookupError):
    """Raised when no builder is registered under the requested name."""


class ConfigurationError(BuilderError, ValueError):
    """Raised when a configuration cannot be applied."""


__all__ = [
    "AggregateBuildError",
    "BuilderError",
    "BuilderNotFoundError",
    "ConfigurationError",
    "FieldValidationError",
    "RegistrationError",
    "RequiredFieldError",
]
