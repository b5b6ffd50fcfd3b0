"""CLI command for importing contests and candidates from a voterinfo feed."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from voter_info.lib.voter_info_feed import VoterInfoFeed
from voter_info.services.feed_import_service import ImportResult


def import_feed(
    file_path: Annotated[Path, typer.Argument(help="Path to a voterinfo JSON document", exists=True, dir_okay=False)],
    create_tables: Annotated[
        bool,
        typer.Option("--create-tables", help="Create tables first (SQLite scratch databases)"),
    ] = False,
) -> None:
    """Import contests and candidates from a voterinfo JSON file."""
    from voter_info.lib.voter_info_feed import FeedParseError, load_voter_info_feed

    try:
        feed = load_voter_info_feed(file_path)
    except FeedParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    result = asyncio.run(_import_impl(feed, create_tables))
    typer.echo(
        f"Imported {result.candidates_imported} candidates: "
        f"{result.contests_created} contests created, {result.contests_updated} updated, "
        f"{result.contests_merged} merged"
    )


async def _import_impl(feed: VoterInfoFeed, create_tables: bool) -> ImportResult:
    """Async implementation of the import-feed command."""
    from voter_info.core.config import get_settings
    from voter_info.core.database import create_all, dispose_engine, get_session_factory, init_engine
    from voter_info.services.candidate_service import SqlRecordStore
    from voter_info.services.feed_import_service import import_voter_info

    settings = get_settings()
    init_engine(settings.database_url, echo=False)

    try:
        if create_tables:
            logger.info("Creating tables before import")
            await create_all()
        async with get_session_factory()() as session:
            return await import_voter_info(SqlRecordStore(session), feed)
    finally:
        await dispose_engine()
