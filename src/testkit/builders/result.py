"""Two-case result returned by ``Builder.build``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from .exceptions import BuilderError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Finished entity produced by a builder."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """Error explaining why a builder could not produce its entity."""

    error: BuilderError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


BuildResult = Success[T] | Failure


__all__ = ["BuildResult", "Failure", "Success"]
