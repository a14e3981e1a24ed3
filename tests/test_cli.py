"""Tests for the Typer CLI."""

import ast

from typer.testing import CliRunner
from modelgen.cli.app import app

runner = CliRunner()


def _files(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*.py"))


def test_generates_model_test_and_migration(project):
    """Test a basic run."""
    result = runner.invoke(app, ["model", "User", "users", "name:string", "age:integer"])
    assert result.exit_code == 0, result.output
    files = _files(project)
    assert "app/models/user.py" in files
    assert "tests/models/test_user.py" in files
    migrations = [f for f in files if f.startswith("migrations/versions/")]
    assert len(migrations) == 1
    assert migrations[0].endswith("_create_user.py")
    assert "* creating" in result.output
    assert "alembic upgrade head" in result.output
    for name in files:
        ast.parse((project / name).read_text(encoding="utf-8"))


def test_no_migration(project):
    """Test --no-migration."""
    result = runner.invoke(app, ["model", "User", "users", "name", "--no-migration"])
    assert result.exit_code == 0, result.output
    assert not (project / "migrations").exists()
    assert "alembic upgrade head" not in result.output


def test_migration_disabled_by_environment(project, monkeypatch):
    """Test that configured defaults apply and --migration overrides them."""
    from modelgen.config.settings import reset_settings

    monkeypatch.setenv("MODELGEN_MIGRATION", "false")
    reset_settings()
    result = runner.invoke(app, ["model", "User", "users", "name"])
    assert result.exit_code == 0, result.output
    assert not (project / "migrations").exists()

    result = runner.invoke(app, ["model", "Post", "posts", "title", "--migration"])
    assert result.exit_code == 0, result.output
    assert (project / "migrations" / "versions").exists()


def test_binary_id(project):
    """Test --binary-id."""
    result = runner.invoke(app, ["model", "Post", "posts", "user_id:references:users", "--binary-id"])
    assert result.exit_code == 0, result.output
    model = (project / "app" / "models" / "post.py").read_text(encoding="utf-8")
    assert "id: Mapped[uuid.UUID]" in model


def test_instructions_are_printed(project):
    """Test --instructions."""
    result = runner.invoke(
        app, ["model", "User", "users", "name", "--instructions", "Add the resource to your router"]
    )
    assert result.exit_code == 0, result.output
    assert "Add the resource to your router" in result.output


def test_missing_reference_target(project):
    """Test that id:references aborts with a helpful message."""
    result = runner.invoke(app, ["model", "User", "users", "name", "id:references"])
    assert result.exit_code == 1
    assert "id:references" in result.output
    assert _files(project) == []


def test_unknown_type(project):
    """Test that an unknown type aborts naming the type."""
    result = runner.invoke(app, ["model", "User", "users", "status:frobnicate"])
    assert result.exit_code == 1
    assert "Unknown type `frobnicate`" in result.output
    assert _files(project) == []


def test_invalid_attribute(project):
    """Test a malformed token."""
    result = runner.invoke(app, ["model", "User", "users", "a:b:c:d"])
    assert result.exit_code == 1
    assert "Invalid attribute `a:b:c:d`" in result.output


def test_plural_looks_like_attribute(project):
    """Test that a missing plural is reported with usage."""
    result = runner.invoke(app, ["model", "User", "name:string"])
    assert result.exit_code == 1
    assert "expects both singular and plural names" in result.output


def test_existing_module(project):
    """Test that an existing model module is not replaced."""
    assert runner.invoke(app, ["model", "User", "users", "name"]).exit_code == 0
    result = runner.invoke(app, ["model", "User", "users", "name"])
    assert result.exit_code == 1
    assert "already taken" in result.output


def test_overwrite_prompt_declined(project):
    """Test that an existing test stub is kept when the prompt is declined."""
    stub = project / "tests" / "models" / "test_user.py"
    stub.parent.mkdir(parents=True)
    stub.write_text("keep me")
    result = runner.invoke(app, ["model", "User", "users", "name", "--no-migration"], input="n\n")
    assert result.exit_code == 0, result.output
    assert stub.read_text() == "keep me"
    assert (project / "app" / "models" / "user.py").exists()
