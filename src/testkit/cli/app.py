"""Typer CLI demonstrating the testkit builders."""

from __future__ import annotations

import typer

from testkit.builders import (
    USER_BUILDER_NAME,
    BuilderConfig,
    BuilderFactory,
    BuilderNotFoundError,
    Failure,
    Success,
    UserBuilder,
)

from .deps import get_factory, get_settings

app = typer.Typer(help="testkit builder utilities")


def _parse_tag(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"tag {raw!r} must look like key=value")
    return key, value


def _require_user_builder(factory: BuilderFactory, name: str = USER_BUILDER_NAME) -> UserBuilder:
    try:
        builder = factory.create(name)
    except BuilderNotFoundError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    if not isinstance(builder, UserBuilder):
        typer.echo(f"builder {name!r} is not a user builder")
        raise typer.Exit(code=1)
    return builder


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log level:\t" + settings.log_level)
    typer.echo("Built-ins:\t" + ("enabled" if settings.register_builtins else "disabled"))


@app.command("list-builders")
def list_builders() -> None:
    """List the builder names registered on the factory."""

    names = sorted(get_factory().get_registered_names())
    if not names:
        typer.echo("No builders registered")
        return
    for name in names:
        typer.echo(name)


@app.command("build-user")
def build_user(
    name: str | None = typer.Option(None, help="User name"),
    email: str | None = typer.Option(None, help="User email"),
    user_id: int | None = typer.Option(None, "--id", help="User identifier"),
    age: int | None = typer.Option(None, help="User age"),
    active: bool = typer.Option(False, "--active/--inactive", help="Active flag"),
    tag: list[str] = typer.Option([], "--tag", help="User tag as key=value, repeatable"),
    validate: bool = typer.Option(True, "--validate/--no-validate", help="Toggle validation"),
) -> None:
    """Build a single user and print it as JSON, or print why it failed."""

    builder = _require_user_builder(get_factory()).with_validation(validate)
    if user_id is not None:
        builder.with_id(user_id)
    if name is not None:
        builder.with_name(name)
    if email is not None:
        builder.with_email(email)
    if age is not None:
        builder.with_age(age)
    builder.with_active(active)
    for raw in tag:
        key, value = _parse_tag(raw)
        builder.with_user_tag(key, value)

    result = builder.build()
    if isinstance(result, Failure):
        typer.echo(f"Build failed: {result.error}")
        raise typer.Exit(code=1)
    typer.echo(result.value.model_dump_json())


@app.command("demo")
def demo() -> None:
    """Walk through basic use, factories, configuration, validation and cloning."""

    factory = get_factory()

    typer.echo("1. Basic user builder")
    result = (
        UserBuilder()
        .with_name("Alice Smith")
        .with_email("alice@example.com")
        .with_age(28)
        .with_active(True)
        .with_user_tag("department", "engineering")
        .with_metadata("hire_date", "2023-01-15")
        .build()
    )
    typer.echo(f"   {_describe(result)}")

    typer.echo("2. Factory")
    builder = _require_user_builder(factory)
    result = builder.with_name("Bob Wilson").with_email("bob@example.com").with_age(35).build()
    typer.echo(f"   {_describe(result)}")

    typer.echo("3. Configuration")
    config = (
        BuilderConfig()
        .with_validation(True)
        .with_tag("env", "test")
        .with_tag("team", "qa")
        .with_default("name", "Test User")
        .with_default("email", "test@example.com")
        .with_default("age", 30)
        .with_default("active", True)
    )
    configured = UserBuilder()
    config.apply_to(configured)
    typer.echo(f"   {_describe(configured.build())}")
    typer.echo(f"   builder tags: env={configured.get_tag('env')}, team={configured.get_tag('team')}")

    typer.echo("4. Validation")
    invalid = UserBuilder().with_name("").with_email("").with_age(-5)
    typer.echo(f"   {_describe(invalid.build())}")

    typer.echo("5. Clone and reset")
    original = (
        UserBuilder()
        .with_name("Original User")
        .with_email("original@example.com")
        .with_tag("version", "v1")
    )
    cloned = original.clone().with_name("Cloned User").with_tag("version", "v2")
    typer.echo(f"   original ({original.get_tag('version')}): {_describe(original.build())}")
    typer.echo(f"   clone ({cloned.get_tag('version')}): {_describe(cloned.build())}")
    original.reset()
    typer.echo(f"   after reset, original has errors: {original.has_errors()}")

    typer.echo("6. Custom factory")
    custom = BuilderFactory()
    custom.register(
        "admin_user",
        lambda: UserBuilder().with_user_tag("role", "admin").with_active(True),
    )
    admin = _require_user_builder(custom, "admin_user")
    result = admin.with_name("Admin User").with_email("admin@example.com").build()
    typer.echo(f"   {_describe(result)}")


def _describe(result: Success[object] | Failure) -> str:
    if not result.ok:
        return f"error: {result.error}"  # type: ignore[union-attr]
    return repr(result.unwrap())


__all__ = ["app"]
