from __future__ import annotations

import logging

import pytest

from testkit.builders import BuilderFactory, UserBuilder, default_factory
from testkit.config import AppSettings
from testkit.container import build_factory, init_default_factory


def test_build_factory_registers_builtins() -> None:
    factory = build_factory(AppSettings(environment="test"))

    assert factory is not default_factory
    assert factory.get_registered_names() == {"user"}
    assert isinstance(factory.create("user"), UserBuilder)


def test_build_factory_without_builtins() -> None:
    factory = build_factory(AppSettings(environment="test", register_builtins=False))

    assert isinstance(factory, BuilderFactory)
    assert factory.get_registered_names() == frozenset()


@pytest.mark.usefixtures("clean_default_factory")
def test_default_factory_populated_only_on_init() -> None:
    assert not default_factory.is_registered("user")

    returned = init_default_factory(AppSettings(environment="test"))

    assert returned is default_factory
    assert default_factory.is_registered("user")
    first = default_factory.create("user")
    second = default_factory.create("user")
    assert first is not second


def test_build_factory_uses_supplied_logger(caplog: pytest.LogCaptureFixture) -> None:
    custom_logger = logging.getLogger("tests.container")

    with caplog.at_level(logging.DEBUG, logger="tests.container"):
        build_factory(AppSettings(environment="ci", register_builtins=False), logger=custom_logger)
        factory = build_factory(AppSettings(environment="test"), logger=custom_logger)

    messages = [r.getMessage() for r in caplog.records if r.name == "tests.container"]
    assert "Built-in builders disabled for environment ci" in messages
    assert "Registered builder 'user'" in messages
    assert factory.is_registered("user")
