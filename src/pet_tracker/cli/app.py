"""Typer CLI root application with serve command."""

import typer

from pet_tracker.core.config import get_settings
from pet_tracker.core.logging import setup_logging

app = typer.Typer(name="pet-tracker", help="Pet-tracking sensor sightings CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "pet_tracker.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from pet_tracker.cli.db_cmd import db_app
    from pet_tracker.cli.sightings_cmd import sightings_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(sightings_app, name="sightings", help="Sighting maintenance commands")


_register_subcommands()
