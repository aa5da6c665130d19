"""Reusable configuration bundles applicable to any builder."""

from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import Field

from testkit.models import MutableModel

from .base import ConfigurableBuilder, SupportsTagging, SupportsValidationToggle
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class BuilderConfig(MutableModel):
    """Validation flag, tags and default field values pushed into builders.

    Any builder exposing ``with_validation`` / ``with_tag`` receives the flag
    and tags. Default values only reach builders implementing
    ``apply_config``; others silently ignore them.
    """

    validation_enabled: bool = True
    tags: dict[str, str] = Field(default_factory=dict)
    default_values: dict[str, Any] = Field(default_factory=dict)

    def with_validation(self, enabled: bool) -> Self:
        self.validation_enabled = enabled
        return self

    def with_tag(self, key: str, value: str) -> Self:
        self.tags[key] = value
        return self

    def with_default(self, key: str, value: Any) -> Self:
        self.default_values[key] = value
        return self

    def apply_to(self, builder: object | None) -> None:
        """Apply this configuration to ``builder`` without mutating the configuration."""

        if builder is None:
            msg = "builder cannot be None"
            raise ConfigurationError(msg)

        if isinstance(builder, SupportsValidationToggle):
            builder.with_validation(self.validation_enabled)

        if isinstance(builder, SupportsTagging):
            for key, value in self.tags.items():
                builder.with_tag(key, value)

        if isinstance(builder, ConfigurableBuilder):
            builder.apply_config(self)
        elif self.default_values:
            logger.debug(
                "%s does not accept configuration; skipped %d default value(s)",
                type(builder).__name__,
                len(self.default_values),
            )


__all__ = ["BuilderConfig"]
