from __future__ import annotations

from testkit.builders import BaseBuilder, Builder, FieldValidationError, Success


def test_new_base_builder_defaults() -> None:
    builder = BaseBuilder()

    assert builder.is_validation_enabled()
    assert not builder.has_errors()
    assert builder.get_errors() == ()
    assert not builder.has_tag("env")
    assert builder.get_tag("env") == ""
    assert isinstance(builder, Builder)


def test_tags_are_chained_and_overwritten() -> None:
    builder = BaseBuilder()

    result = builder.with_tag("env", "test").with_tag("env", "staging").with_tag("team", "qa")

    assert result is builder
    assert builder.get_tag("env") == "staging"
    assert builder.has_tag("team")


def test_missing_tag_container_is_tolerated() -> None:
    builder = BaseBuilder()
    builder._tags = None

    assert builder.get_tag("env") == ""
    assert not builder.has_tag("env")

    builder.with_tag("env", "test")
    assert builder.get_tag("env") == "test"


def test_missing_error_container_is_tolerated() -> None:
    builder = BaseBuilder()
    builder._errors = None

    assert builder.get_errors() == ()
    assert not builder.has_errors()

    builder.add_error(ValueError("boom"))
    assert builder.has_errors()


def test_add_error_ignores_none_and_keeps_order() -> None:
    first = FieldValidationError("id", "first")
    second = FieldValidationError("age", "second")
    builder = BaseBuilder()

    builder.add_error(None).add_error(first).add_error(second)

    assert builder.get_errors() == (first, second)


def test_get_errors_returns_snapshot() -> None:
    builder = BaseBuilder().add_error(ValueError("boom"))

    errors = builder.get_errors()
    builder.clear_errors()

    assert len(errors) == 1
    assert not builder.has_errors()


def test_validation_toggle() -> None:
    builder = BaseBuilder().with_validation(False)
    assert not builder.is_validation_enabled()


def test_default_build_returns_empty_success() -> None:
    result = BaseBuilder().build()

    assert isinstance(result, Success)
    assert result.value is None


def test_reset_restores_defaults() -> None:
    builder = BaseBuilder().with_tag("env", "test").with_validation(False)
    builder.add_error(ValueError("boom"))

    assert builder.reset() is builder
    assert not builder.has_tag("env")
    assert not builder.has_errors()
    assert builder.is_validation_enabled()


def test_clone_is_independent_and_keeps_errors() -> None:
    error = ValueError("boom")
    original = BaseBuilder().with_tag("env", "test").with_validation(False).add_error(error)

    clone = original.clone()

    assert clone is not original
    assert clone.get_tag("env") == "test"
    assert not clone.is_validation_enabled()
    assert clone.get_errors() == (error,)

    clone.with_tag("env", "prod").add_error(ValueError("other"))
    original.clear_errors()

    assert original.get_tag("env") == "test"
    assert len(clone.get_errors()) == 2
