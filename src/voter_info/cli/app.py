"""Typer CLI root application with serve command."""

import typer

from voter_info.core.config import get_settings
from voter_info.core.logging import setup_logging

app = typer.Typer(name="voter-info", help="Voter information records and popup layout CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "voter_info.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from voter_info.cli.candidates_cmd import candidates_app
    from voter_info.cli.db_cmd import db_app
    from voter_info.cli.import_cmd import import_feed
    from voter_info.cli.popup_cmd import popup

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(candidates_app, name="candidates", help="Candidate record commands")
    app.command("import-feed")(import_feed)
    app.command("popup")(popup)


_register_subcommands()
