"""Load messages from a JSON file."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from .models import Message

logger = logging.getLogger(__name__)


def _parse_date(value) -> datetime | None:
    """Parse an ISO-8601 string or epoch milliseconds; None when unusable."""
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return _parse_date(int(text))
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def _text(record: dict, *keys: str) -> str:
    for key in keys:
        value = record.get(key)
        if value:
            return str(value)
    return ""


def message_from_dict(record: dict) -> Message:
    """Build a Message from a loosely-shaped dict, defaulting missing fields."""
    date = _parse_date(record.get("date"))
    if date is None and record.get("date"):
        logger.debug("Ignoring unparseable date %r", record.get("date"))

    return Message(
        sender=_text(record, "from", "sender"),
        subject=_text(record, "subject"),
        snippet=_text(record, "snippet"),
        body_preview=_text(record, "bodyPreview", "body_preview"),
        date=date,
        message_id=_text(record, "id", "message_id"),
    )


def load_messages(path: str | Path) -> list[Message]:
    """Read a JSON array of message objects from ``path``.

    Raises ValueError when the file is not a JSON array of objects.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"{path} must contain a JSON array of message objects")

    messages = [message_from_dict(item) for item in data]
    logger.debug("Loaded %d messages from %s", len(messages), path)
    return messages
