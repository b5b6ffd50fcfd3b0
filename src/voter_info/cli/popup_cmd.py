"""CLI command that lays out and prints an info popup."""

from pathlib import Path
from typing import Annotated

import typer

from voter_info.core.config import get_settings
from voter_info.schemas.polling_location import PollingLocationWrapper
from voter_info.services.popup_service import build_popup, render_popup


def _wrapper_from_feed(feed_path: Path, index: int) -> PollingLocationWrapper:
    from voter_info.lib.voter_info_feed import FeedParseError, load_voter_info_feed

    try:
        feed = load_voter_info_feed(feed_path)
    except FeedParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    locations = feed.pollingLocations + feed.earlyVoteSites
    if not 0 <= index < len(locations):
        typer.echo(f"Error: feed has {len(locations)} polling location(s), index {index} is out of range", err=True)
        raise typer.Exit(code=1)
    return locations[index].to_wrapper()


def popup(
    name: Annotated[str | None, typer.Option("--name", help="Popup title")] = None,
    address: Annotated[str | None, typer.Option("--address", help="Address; use \\n for line breaks")] = None,
    hours: Annotated[str | None, typer.Option("--hours", help="Polling hours")] = None,
    party: Annotated[str | None, typer.Option("--party", help="Candidate party")] = None,
    feed: Annotated[
        Path | None,
        typer.Option("--feed", help="Take the polling location from a voterinfo JSON file", exists=True),
    ] = None,
    index: Annotated[int, typer.Option("--index", help="Polling location index within --feed")] = 0,
    max_width: Annotated[float, typer.Option("--max-width", help="Maximum popup width")] = 300.0,
    max_height: Annotated[float, typer.Option("--max-height", help="Maximum popup height")] = 200.0,
    renderer: Annotated[str, typer.Option("--format", help="Renderer: text or html")] = "text",
) -> None:
    """Lay out an info popup and print it."""
    if feed is not None:
        wrapper = _wrapper_from_feed(feed, index)
    elif name is not None:
        wrapper = PollingLocationWrapper(
            name=name,
            address=address.replace("\\n", "\n") if address else None,
            polling_hours=hours,
            party=party,
        )
    else:
        typer.echo("Error: provide --name or --feed", err=True)
        raise typer.Exit(code=1)

    try:
        layout = build_popup(wrapper, max_width, max_height, get_settings())
        output = render_popup(layout, renderer)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(output)
    typer.echo(f"{layout.frame.width:g}x{layout.frame.height:g}{' (truncated)' if layout.truncated else ''}")
