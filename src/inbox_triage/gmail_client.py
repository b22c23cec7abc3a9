"""Gmail API client functions for fetching messages to triage."""

from __future__ import annotations

import base64
import logging
from datetime import datetime, timezone
from typing import Callable

from googleapiclient.errors import HttpError
from googleapiclient.http import BatchHttpRequest
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from inbox_triage.constants import BATCH_SIZE, BODY_PREVIEW_CHARS, PAGE_SIZE
from inbox_triage.models import Message

logger = logging.getLogger(__name__)


def _is_retryable_http_error(exc: BaseException) -> bool:
    return isinstance(exc, HttpError) and exc.resp.status in (429, 500, 503)


def _decode(data: str) -> str:
    return base64.urlsafe_b64decode(data).decode("utf-8", errors="replace")


def _find_part(part: dict, mime_type: str) -> str | None:
    # Depth-first through multipart payloads.
    if part.get("mimeType") == mime_type and part.get("body", {}).get("data"):
        return _decode(part["body"]["data"])
    for child in part.get("parts", []) or []:
        found = _find_part(child, mime_type)
        if found:
            return found
    return None


def extract_body_preview(payload: dict, limit: int = BODY_PREVIEW_CHARS) -> str:
    """Return the start of the plain-text body, falling back to HTML."""
    if payload.get("body", {}).get("data"):
        text = _decode(payload["body"]["data"])
    else:
        text = _find_part(payload, "text/plain") or _find_part(payload, "text/html") or ""
    return " ".join(text.split())[:limit]


def _parse_internal_date(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def message_from_resource(resource: dict) -> Message:
    """Convert a Gmail ``users.messages.get`` resource into a Message."""
    payload = resource.get("payload", {})
    headers = {h["name"].lower(): h["value"] for h in payload.get("headers", [])}

    return Message(
        sender=headers.get("from", ""),
        subject=headers.get("subject", ""),
        snippet=resource.get("snippet", ""),
        body_preview=extract_body_preview(payload),
        date=_parse_internal_date(resource.get("internalDate")),
        message_id=resource.get("id", ""),
    )


def list_message_ids(
    service,
    query: str | None = None,
    max_results: int | None = None,
) -> list[str]:
    """List all message IDs matching the query, handling pagination."""
    ids: list[str] = []
    page_token: str | None = None

    while True:
        kwargs: dict = {"userId": "me", "maxResults": PAGE_SIZE, "fields": "messages/id,nextPageToken"}
        if query:
            kwargs["q"] = query
        if page_token:
            kwargs["pageToken"] = page_token

        resp = service.users().messages().list(**kwargs).execute()
        messages = resp.get("messages", [])
        for msg in messages:
            ids.append(msg["id"])
            if max_results and len(ids) >= max_results:
                return ids[:max_results]

        page_token = resp.get("nextPageToken")
        if not page_token:
            break

    return ids


@retry(
    retry=retry_if_exception(_is_retryable_http_error),
    wait=wait_exponential(multiplier=1, min=1, max=60),
    stop=stop_after_attempt(5),
    reraise=True,
)
def _execute_batch(batch: BatchHttpRequest) -> None:
    batch.execute()


def fetch_messages(
    service,
    message_ids: list[str],
    callback: Callable[[int, int], None] | None = None,
) -> list[Message]:
    """Fetch full messages in batches using BatchHttpRequest.

    Results keep the order of ``message_ids``; messages that fail to
    download are logged and skipped.
    """
    fetched: dict[str, Message] = {}
    total_batches = (len(message_ids) + BATCH_SIZE - 1) // BATCH_SIZE

    for batch_num in range(total_batches):
        start = batch_num * BATCH_SIZE
        end = min(start + BATCH_SIZE, len(message_ids))
        chunk = message_ids[start:end]

        batch = service.new_batch_http_request()

        def _make_callback(msg_id: str):
            def _cb(request_id, response, exception):
                if exception is not None:
                    logger.warning("Skipping message %s: %s", msg_id, exception)
                    return
                fetched[msg_id] = message_from_resource(response)

            return _cb

        for msg_id in chunk:
            batch.add(
                service.users().messages().get(userId="me", id=msg_id, format="full"),
                callback=_make_callback(msg_id),
            )

        _execute_batch(batch)

        if callback:
            callback(batch_num + 1, total_batches)

    return [fetched[msg_id] for msg_id in message_ids if msg_id in fetched]
