"""Database migration CLI commands using Alembic programmatically."""

import asyncio

import typer
from loguru import logger

db_app = typer.Typer()


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
) -> None:
    """Run database migrations up to the target revision."""
    from alembic import command
    from alembic.config import Config

    config = Config("alembic.ini")
    logger.info(f"Upgrading database to {revision}")
    command.upgrade(config, revision)
    logger.info("Database upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
) -> None:
    """Rollback database migration to the target revision."""
    from alembic import command
    from alembic.config import Config

    config = Config("alembic.ini")
    logger.info(f"Downgrading database to {revision}")
    command.downgrade(config, revision)
    logger.info("Database downgrade complete")


@db_app.command()
def current() -> None:
    """Show the current database migration revision."""
    from alembic import command
    from alembic.config import Config

    config = Config("alembic.ini")
    command.current(config, verbose=True)


@db_app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", help="Skip the confirmation prompt"),
) -> None:
    """Remove every contest and candidate from the record store."""
    if not yes:
        typer.confirm("Delete all contests and candidates?", abort=True)
    asyncio.run(_reset_impl())
    typer.echo("Record store reset")


async def _reset_impl() -> None:
    from voter_info.core.config import get_settings
    from voter_info.core.database import dispose_engine, get_session_factory, init_engine
    from voter_info.services.candidate_service import SqlRecordStore

    settings = get_settings()
    init_engine(settings.database_url, echo=False)
    try:
        async with get_session_factory()() as session:
            await SqlRecordStore(session).reset()
    finally:
        await dispose_engine()
