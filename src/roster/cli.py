"""Command-line entry point for the roster."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import click

from roster import __version__
from roster.config import ConfigError, RosterSettings, load_settings
from roster.logging import get_logger, setup_logging
from roster.roster_store import RosterStore
from roster.storage import KeyValueStudentStorage, SqliteKeyValueBackend, StorageError

logger = get_logger("cli")


def _load(config_path: Path | None) -> RosterSettings:
    try:
        return load_settings(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def format_birth_date(value: str) -> str:
    """Show an ISO date as dd/mm/yyyy; anything else is shown unchanged."""
    try:
        return date.fromisoformat(value).strftime("%d/%m/%Y")
    except ValueError:
        return value


config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a roster YAML settings file",
)


@click.group()
@click.version_option(__version__)
def main() -> None:
    """Student roster manager."""
    pass


@main.command()
@config_option
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", type=int, default=None, help="Port (default from settings)")
def serve(config_path: Path | None, host: str | None, port: int | None) -> None:
    """Run the REST API."""
    import uvicorn  # noqa: PLC0415

    from roster.api import create_app  # noqa: PLC0415

    settings = _load(config_path)
    setup_logging(log_dir=settings.log_dir, level=settings.log_level)

    app = create_app(settings)
    uvicorn.run(app, host=host or settings.host, port=port or settings.port)


@main.command("list")
@config_option
def list_command(config_path: Path | None) -> None:
    """Print the stored roster in order."""
    settings = _load(config_path)

    backend = SqliteKeyValueBackend(settings.db_path)
    try:
        store = RosterStore(KeyValueStudentStorage(backend, key=settings.storage_key))
    except StorageError as e:
        logger.error("Cannot read roster: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        backend.close()

    students = store.list_students()
    if not students:
        click.echo("No students registered yet.")
        return

    for student in students:
        click.echo(
            f"{student.nome}\t{student.matricula}\t{student.email}\t"
            f"{format_birth_date(student.data_nascimento)}"
        )
    click.echo(f"{len(students)} student(s)")


if __name__ == "__main__":
    main()
