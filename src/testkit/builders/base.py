"""Builder contracts and the shared base implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Self, runtime_checkable

from .result import BuildResult, Success

if TYPE_CHECKING:
    from .configuration import BuilderConfig


@runtime_checkable
class Builder(Protocol):
    """Common contract for every test data builder."""

    def build(self) -> BuildResult[Any]: ...

    def reset(self) -> Self: ...

    def clone(self) -> Self: ...


@runtime_checkable
class SupportsValidationToggle(Protocol):
    """Builders whose validation can be switched on or off."""

    def with_validation(self, enabled: bool) -> Any: ...


@runtime_checkable
class SupportsTagging(Protocol):
    """Builders that accept metadata tags."""

    def with_tag(self, key: str, value: str) -> Any: ...


@runtime_checkable
class ConfigurableBuilder(Builder, Protocol):
    """Builders that can apply a full configuration, including typed defaults."""

    def apply_config(self, config: BuilderConfig | None) -> None: ...


class BaseBuilder:
    """Tags, validation flag and accumulated errors shared by all builders.

    Concrete builders subclass this, add their entity-specific setters and
    override ``build``, ``reset`` and ``clone``.
    """

    def __init__(self) -> None:
        self._tags: dict[str, str] | None = {}
        self._validation_enabled = True
        self._errors: list[BaseException] | None = []

    def with_tag(self, key: str, value: str) -> Self:
        """Attach a metadata tag used for identification or conditional logic."""

        if self._tags is None:
            self._tags = {}
        self._tags[key] = value
        return self

    def get_tag(self, key: str) -> str:
        """Return the tag value, or an empty string when the tag is missing."""

        if self._tags is None:
            return ""
        return self._tags.get(key, "")

    def has_tag(self, key: str) -> bool:
        if self._tags is None:
            return False
        return key in self._tags

    def with_validation(self, enabled: bool) -> Self:
        self._validation_enabled = enabled
        return self

    def is_validation_enabled(self) -> bool:
        return self._validation_enabled

    def add_error(self, error: BaseException | None) -> Self:
        """Record an error; ``None`` is ignored."""

        if error is None:
            return self
        if self._errors is None:
            self._errors = []
        self._errors.append(error)
        return self

    def get_errors(self) -> tuple[BaseException, ...]:
        """Return the accumulated errors in the order they were recorded."""

        if self._errors is None:
            return ()
        return tuple(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def clear_errors(self) -> Self:
        self._errors = []
        return self

    def build(self) -> BuildResult[Any]:
        """Default build producing no entity; concrete builders override this."""

        return Success(None)

    def reset(self) -> Self:
        """Restore empty tags, enabled validation and no errors."""

        self._tags = {}
        self._validation_enabled = True
        self._errors = []
        return self

    def clone(self) -> BaseBuilder:
        clone = BaseBuilder()
        self._copy_state_to(clone)
        return clone

    def _copy_state_to(self, target: BaseBuilder) -> None:
        # Errors are carried into the copy; containers are never shared.
        target._tags = dict(self._tags or {})
        target._validation_enabled = self._validation_enabled
        target._errors = list(self._errors or [])


__all__ = [
    "BaseBuilder",
    "Builder",
    "ConfigurableBuilder",
    "SupportsTagging",
    "SupportsValidationToggle",
]
