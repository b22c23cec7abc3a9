"""CLI entry point for Inbox Triage."""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from . import __version__
from .analyzer import rank_messages, select_urgent, summarize_batch
from .auth import check_auth, get_gmail_service
from .constants import DEFAULT_MAX_MESSAGES
from .display import (
    console,
    display_auth_status,
    display_message_detail,
    display_ranked,
    display_summary,
)
from .export import export_ranked
from .loader import load_messages
from .models import RankedMessage
from .triage import triage_mailbox

logger = logging.getLogger(__name__)

_FORMAT_OPTION = click.option(
    "--format",
    "fmt",
    type=click.Choice(["csv", "json"]),
    default="csv",
    help="Output format.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_ranked(input_path: str) -> list[RankedMessage]:
    try:
        messages = load_messages(input_path)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    return rank_messages(messages)


def _show(ranked: list[RankedMessage], urgent_only: bool, detail: int) -> list[RankedMessage]:
    summary = summarize_batch(ranked)
    if urgent_only:
        ranked = select_urgent(ranked)
    display_ranked(ranked, title="Urgent Messages" if urgent_only else "Triage Results")
    display_summary(summary)
    for item in ranked[:detail]:
        display_message_detail(item)
    return ranked


def _save(ranked: list[RankedMessage], fmt: str, output: str | None) -> None:
    if not output:
        return
    export_ranked(ranked, format=fmt, output_path=output)
    console.print(f"Results saved to {output}")


@click.group()
@click.version_option(version=__version__, prog_name="inbox-triage")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Inbox Triage - rank incoming email by urgency and business relevance."""
    _configure_logging(verbose)


@cli.command()
@click.option("-q", "--query", default=None, help="Gmail search query (e.g. 'newer_than:2d').")
@click.option(
    "-m", "--max-messages", default=DEFAULT_MAX_MESSAGES, type=int, help="Maximum messages to triage."
)
@click.option("--urgent-only", is_flag=True, help="Show only the urgent digest.")
@click.option("--detail", default=0, type=int, help="Show full analysis for the top N messages.")
@_FORMAT_OPTION
@click.option("-o", "--output", default=None, help="Also export results to this path.")
def triage(
    query: str | None,
    max_messages: int,
    urgent_only: bool,
    detail: int,
    fmt: str,
    output: str | None,
) -> None:
    """Fetch messages from Gmail and rank them."""
    try:
        service = get_gmail_service()
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e

    ranked = triage_mailbox(service, query=query, max_results=max_messages)
    ranked = _show(ranked, urgent_only, detail)
    _save(ranked, fmt, output)


@cli.command()
@click.argument("input_path", type=click.Path(dir_okay=False))
@click.option("--urgent-only", is_flag=True, help="Show only the urgent digest.")
@click.option("--detail", default=0, type=int, help="Show full analysis for the top N messages.")
@_FORMAT_OPTION
@click.option("-o", "--output", default=None, help="Also export results to this path.")
def analyze(input_path: str, urgent_only: bool, detail: int, fmt: str, output: str | None) -> None:
    """Rank messages read from a JSON file."""
    ranked = _load_ranked(input_path)
    logger.debug("Ranked %d messages from %s", len(ranked), input_path)
    ranked = _show(ranked, urgent_only, detail)
    _save(ranked, fmt, output)


@cli.command(name="export")
@click.argument("input_path", type=click.Path(dir_okay=False))
@_FORMAT_OPTION
@click.option("-o", "--output", required=True, help="Output file path.")
def export_cmd(input_path: str, fmt: str, output: str) -> None:
    """Rank messages from a JSON file and export them to CSV or JSON."""
    ranked = _load_ranked(input_path)
    _save(ranked, fmt, output)


@cli.command()
def auth() -> None:
    """Test Gmail authentication."""
    ok, detail = check_auth()
    display_auth_status(ok, detail)
    if not ok:
        raise SystemExit(1)
