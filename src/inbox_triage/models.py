"""Data models for Inbox Triage."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Message:
    """A single incoming email, as supplied by the mailbox retrieval layer."""

    sender: str = ""  # From header value or bare address
    subject: str = ""
    snippet: str = ""
    body_preview: str = ""
    date: datetime | None = None  # naive values are treated as UTC
    message_id: str = ""


@dataclass(frozen=True)
class Signals:
    """Text and metadata signals extracted from a message."""

    content: str
    from_domain: str
    hours_old: float


@dataclass(frozen=True)
class Analysis:
    """Triage result for a single message."""

    priority: str
    category: str
    urgency_score: int
    business_relevance: int
    action_required: bool
    estimated_read_time: int  # minutes
    keywords: tuple[str, ...] = ()
    sentiment: str = "neutral"
    suggested_actions: tuple[str, ...] = ()
    reasoning: str = ""
    customer_type: str = "unknown"
    job_value: float | None = None


@dataclass(frozen=True)
class RankedMessage:
    """A message paired with its analysis."""

    message: Message
    analysis: Analysis


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate counts over a ranked batch."""

    total: int
    by_priority: dict[str, int] = field(default_factory=dict)
    by_category: dict[str, int] = field(default_factory=dict)
    urgent_count: int = 0
    high_priority_count: int = 0
    action_required_count: int = 0
