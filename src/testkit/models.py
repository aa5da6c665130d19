"""Core base classes for entity models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MutableModel(BaseModel):
    """Mutable model with strict field names, revalidated on assignment."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


__all__ = ["MutableModel"]
