"""Typer CLI application."""

from pathlib import Path
from typing import List, Optional

import typer

from modelgen.config.settings import get_settings
from modelgen.config.logging import setup_logging, get_logger
from modelgen.config.options import merge_options
from modelgen.generator.errors import GeneratorError
from modelgen.generator.pipeline import generate

logger = get_logger(__name__)

app = typer.Typer(help="modelgen: scaffold SQLAlchemy models, tests and Alembic migrations")

MIGRATE_REMINDER = """
Remember to update your repository by running migrations:

    $ alembic upgrade head
"""


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, help="Logging level (DEBUG, INFO, WARNING, ...)"),
):
    """Configure logging for every command."""
    setup_logging(level=log_level)


def _confirm_overwrite(path: Path) -> bool:
    return typer.confirm(f"{path} already exists, overwrite?", default=False)


@app.command()
def model(
    singular: str = typer.Argument(..., help="Resource name, e.g. User or Admin.User"),
    plural: str = typer.Argument(..., help="Table name, e.g. users"),
    attrs: Optional[List[str]] = typer.Argument(None, help="Attributes as name:type[:modifier]"),
    migration: Optional[bool] = typer.Option(
        None, "--migration/--no-migration", help="Generate the migration file"
    ),
    binary_id: Optional[bool] = typer.Option(
        None, "--binary-id/--no-binary-id", help="Use UUID primary and foreign keys"
    ),
    instructions: Optional[str] = typer.Option(None, help="Extra text printed after generation"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files without asking"),
):
    """
    Generate a model, its test and a migration.

        modelgen model Post posts title body:text user_id:references:users
    """
    settings = get_settings()
    options = merge_options(
        settings, migration=migration, binary_id=binary_id, instructions=instructions
    )

    try:
        generate(
            singular,
            plural,
            attrs or [],
            options,
            settings,
            confirm=_confirm_overwrite,
            force=force,
            report=typer.echo,
        )
    except GeneratorError as e:
        logger.debug(f"Generator aborted: {e!r}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    # Print any extra instruction given by a calling generator
    if options.instructions:
        typer.echo(options.instructions)

    if options.migration:
        typer.echo(MIGRATE_REMINDER)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
