from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from testkit.builders import BuilderFactory, UserBuilder, default_factory  # noqa: E402


@pytest.fixture
def factory() -> BuilderFactory:
    return BuilderFactory()


@pytest.fixture
def alice_builder() -> UserBuilder:
    return (
        UserBuilder()
        .with_name("Alice")
        .with_email("alice@x.com")
        .with_age(28)
        .with_active(True)
        .with_user_tag("department", "engineering")
    )


@pytest.fixture
def clean_default_factory() -> Iterator[None]:
    """Restore the process-wide factory after a test mutates it."""

    saved = dict(default_factory._constructors)
    default_factory._constructors.clear()
    yield
    default_factory._constructors.clear()
    default_factory._constructors.update(saved)
