"""Triage orchestration - fetches messages from Gmail and ranks them."""

from __future__ import annotations

import logging

from .analyzer import rank_messages
from .constants import BATCH_SIZE, DEFAULT_MAX_MESSAGES
from .display import console, create_progress
from .gmail_client import fetch_messages, list_message_ids
from .models import RankedMessage

logger = logging.getLogger(__name__)


def triage_mailbox(
    service,
    query: str | None = None,
    max_results: int | None = DEFAULT_MAX_MESSAGES,
) -> list[RankedMessage]:
    """Run a full mailbox triage: list IDs, fetch messages, rank."""
    # Step 1: List message IDs
    console.print("[bold]Step 1/3:[/bold] Listing message IDs...")
    with create_progress("Listing messages") as progress:
        task = progress.add_task("listing", total=None)
        ids = list_message_ids(service, query=query, max_results=max_results)
        progress.update(task, completed=len(ids), total=len(ids))

    console.print(f"  Found [bold]{len(ids)}[/bold] messages")

    if not ids:
        return []

    # Step 2: Fetch messages
    console.print("[bold]Step 2/3:[/bold] Fetching messages...")
    with create_progress("Fetching messages") as progress:
        total_batches = (len(ids) + BATCH_SIZE - 1) // BATCH_SIZE
        task = progress.add_task("fetching", total=total_batches)

        def on_batch(batch_num: int, total: int) -> None:
            progress.update(task, completed=batch_num)

        messages = fetch_messages(service, ids, callback=on_batch)

    console.print(f"  Fetched [bold]{len(messages)}[/bold] messages")
    if len(messages) < len(ids):
        logger.warning("%d of %d messages could not be fetched", len(ids) - len(messages), len(ids))

    # Step 3: Analyze and rank
    console.print("[bold]Step 3/3:[/bold] Analyzing and ranking...")
    return rank_messages(messages)
