"""User entity and its builder, the reference concrete builder."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from testkit.models import MutableModel

from .base import BaseBuilder
from .configuration import BuilderConfig
from .exceptions import (
    AggregateBuildError,
    ConfigurationError,
    FieldValidationError,
    RequiredFieldError,
)
from .result import BuildResult, Failure, Success

logger = logging.getLogger(__name__)

USER_BUILDER_NAME = "user"


class User(MutableModel):
    """Test user entity.

    Assignments are not revalidated: the builder alone decides what to check.
    """

    model_config = ConfigDict(validate_assignment=False)

    id: int = 0
    name: str = ""
    email: str = ""
    age: int = 0
    active: bool = False
    tags: dict[str, str] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)


# Strict adapters: a bool is not accepted where an int is expected.
_DEFAULT_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "id": TypeAdapter(int),
    "name": TypeAdapter(str),
    "email": TypeAdapter(str),
    "age": TypeAdapter(int),
    "active": TypeAdapter(bool),
}


class UserBuilder(BaseBuilder):
    """Builds :class:`User` instances with per-field validation."""

    def __init__(self) -> None:
        super().__init__()
        self._user = User()

    def with_id(self, user_id: int) -> UserBuilder:
        if self.is_validation_enabled() and user_id < 0:
            self.add_error(FieldValidationError("id", "user ID must be non-negative"))
            return self
        self._user.id = user_id
        return self

    def with_name(self, name: str) -> UserBuilder:
        if self.is_validation_enabled() and not name:
            self.add_error(FieldValidationError("name", "user name cannot be empty"))
            return self
        self._user.name = name
        return self

    def with_email(self, email: str) -> UserBuilder:
        if self.is_validation_enabled() and not email:
            self.add_error(FieldValidationError("email", "user email cannot be empty"))
            return self
        self._user.email = email
        return self

    def with_age(self, age: int) -> UserBuilder:
        if self.is_validation_enabled() and age < 0:
            self.add_error(FieldValidationError("age", "user age must be non-negative"))
            return self
        self._user.age = age
        return self

    def with_active(self, active: bool) -> UserBuilder:
        self._user.active = active
        return self

    def with_user_tag(self, key: str, value: str) -> UserBuilder:
        """Tag the user entity itself (distinct from the builder tags)."""

        self._user.tags[key] = value
        return self

    def with_metadata(self, key: str, value: Any) -> UserBuilder:
        self._user.metadata[key] = value
        return self

    def build(self) -> BuildResult[User]:
        """Return a copy of the user, or the reason it cannot be built.

        Accumulated setter errors take precedence; with validation enabled
        the name and email must also have been set.
        """

        if self.has_errors():
            error = AggregateBuildError("user", self.get_errors())
            logger.debug("User build failed: %s", error)
            return Failure(error)

        if self.is_validation_enabled():
            for field_name in ("name", "email"):
                if not getattr(self._user, field_name):
                    logger.debug("User build failed: %s missing", field_name)
                    return Failure(RequiredFieldError("user", field_name))

        return Success(_copy_user(self._user))

    def reset(self) -> UserBuilder:
        super().reset()
        self._user = User()
        return self

    def clone(self) -> UserBuilder:
        clone = UserBuilder()
        self._copy_state_to(clone)
        clone._user = _copy_user(self._user)
        return clone

    def apply_config(self, config: BuilderConfig | None) -> None:
        """Apply validation, tags and typed user defaults from ``config``."""

        if config is None:
            msg = "config cannot be None"
            raise ConfigurationError(msg)

        self.with_validation(config.validation_enabled)
        for key, value in config.tags.items():
            self.with_tag(key, value)

        setters: dict[str, Callable[[Any], UserBuilder]] = {
            "id": self.with_id,
            "name": self.with_name,
            "email": self.with_email,
            "age": self.with_age,
            "active": self.with_active,
        }
        defaults = _typed_defaults(config.default_values)
        for key, setter in setters.items():
            if key in defaults:
                setter(defaults[key])


def _copy_user(user: User) -> User:
    # Fresh maps, shared values.
    return user.model_copy(update={"tags": dict(user.tags), "metadata": dict(user.metadata)})


def _typed_defaults(defaults: Mapping[str, Any]) -> dict[str, Any]:
    """Keep the defaults that name a user field and carry its exact type."""

    accepted: dict[str, Any] = {}
    for key, value in defaults.items():
        adapter = _DEFAULT_ADAPTERS.get(key)
        if adapter is None:
            continue
        try:
            accepted[key] = adapter.validate_python(value, strict=True)
        except PydanticValidationError:
            logger.debug("Skipping default %r: unexpected type %s", key, type(value).__name__)
    return accepted


def new_user_builder() -> UserBuilder:
    return UserBuilder()


__all__ = ["USER_BUILDER_NAME", "User", "UserBuilder", "new_user_builder"]
