"""CLI commands for browsing and removing contest and candidate records."""

import asyncio
import uuid
from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar

import typer

from voter_info.lib.candidates import RecordStore

candidates_app = typer.Typer()

T = TypeVar("T")


def _parse_uuid(value: str, label: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError as e:
        typer.echo(f"Error: invalid {label} id '{value}'", err=True)
        raise typer.Exit(code=1) from e


def _run(action: Callable[[RecordStore], Awaitable[T]]) -> T:
    """Run ``action`` against a SQL record store for the configured database."""

    async def _impl() -> T:
        from voter_info.core.config import get_settings
        from voter_info.core.database import dispose_engine, get_session_factory, init_engine
        from voter_info.services.candidate_service import SqlRecordStore

        settings = get_settings()
        init_engine(settings.database_url, echo=False)
        try:
            async with get_session_factory()() as session:
                return await action(SqlRecordStore(session))
        finally:
            await dispose_engine()

    return asyncio.run(_impl())


@candidates_app.command("contests")
def list_contests() -> None:
    """List contests by ballot placement."""
    contests = _run(lambda store: store.list_contests())
    if not contests:
        typer.echo("No contests found")
        return
    for contest in contests:
        placement = contest.ballot_placement if contest.ballot_placement is not None else "-"
        typer.echo(f"{contest.id}  [{placement}] {contest.office or '(untitled)'} | {contest.district_name or ''}")


@candidates_app.command("list")
def list_candidates(
    contest_id: Annotated[str, typer.Argument(help="Contest UUID")],
) -> None:
    """List a contest's candidates in display order."""
    cid = _parse_uuid(contest_id, "contest")
    candidates = _run(lambda store: store.list_candidates(cid))
    if not candidates:
        typer.echo("No candidates found")
        return
    for candidate in candidates:
        order = candidate.order_on_ballot if candidate.order_on_ballot is not None else "-"
        party = f" ({candidate.party})" if candidate.party else ""
        typer.echo(f"{order:>3}  {candidate.name or '(no name)'}{party}  {candidate.id}")


@candidates_app.command("delete")
def delete_candidate(
    candidate_id: Annotated[str, typer.Argument(help="Candidate UUID")],
) -> None:
    """Delete one candidate (its contest is kept)."""
    cid = _parse_uuid(candidate_id, "candidate")
    if not _run(lambda store: store.delete_candidate(cid)):
        typer.echo(f"Candidate {cid} not found", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Deleted candidate {cid}")
