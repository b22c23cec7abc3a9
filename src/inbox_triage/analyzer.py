"""Triage pipeline - score, classify, enrich and rank messages."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable

from .constants import (
    CATEGORIES,
    DIGEST_LIMIT,
    DIGEST_MIN_URGENCY,
    PRIORITY_HIGH,
    PRIORITY_RANK,
    PRIORITY_URGENT,
)
from .enrichment import (
    analyze_sentiment,
    build_reasoning,
    detect_customer_type,
    estimate_read_time,
    extract_job_value,
    extract_keywords,
    requires_action,
    suggest_actions,
)
from .models import Analysis, BatchSummary, Message, RankedMessage
from .scorer import (
    calculate_business_relevance,
    calculate_spam_score,
    calculate_urgency_score,
    determine_category,
    determine_priority,
    extract_signals,
)


def analyze_message(message: Message, now: datetime | None = None) -> Analysis:
    """Run the full triage pipeline on a single message.

    ``now`` is the reference time for the recency rules; it defaults to
    the current UTC time.
    """
    signals = extract_signals(message, now=now)
    content = signals.content

    urgency_score = calculate_urgency_score(signals, message)
    business_relevance = calculate_business_relevance(signals)
    spam_score = calculate_spam_score(signals, message)

    category = determine_category(content, urgency_score, business_relevance, spam_score)
    priority = determine_priority(urgency_score, business_relevance, category)
    action_required = requires_action(content, category)

    return Analysis(
        priority=priority,
        category=category,
        urgency_score=urgency_score,
        business_relevance=business_relevance,
        action_required=action_required,
        estimated_read_time=estimate_read_time(content),
        keywords=extract_keywords(content),
        sentiment=analyze_sentiment(content),
        suggested_actions=suggest_actions(category, urgency_score, action_required),
        reasoning=build_reasoning(category, priority, urgency_score, business_relevance),
        customer_type=detect_customer_type(message.sender, content),
        job_value=extract_job_value(content),
    )


def analyze_messages(
    messages: Iterable[Message], now: datetime | None = None
) -> list[RankedMessage]:
    """Analyze each message, keeping the input order."""
    # One reference time for the whole batch.
    now = now or datetime.now(timezone.utc)
    return [RankedMessage(message=m, analysis=analyze_message(m, now=now)) for m in messages]


def sort_by_priority(ranked: Iterable[RankedMessage]) -> list[RankedMessage]:
    """Order by priority, then urgency score, both descending.

    ``sorted`` is stable, so full ties keep their original relative order.
    """
    return sorted(
        ranked,
        key=lambda r: (-PRIORITY_RANK[r.analysis.priority], -r.analysis.urgency_score),
    )


def rank_messages(
    messages: Iterable[Message], now: datetime | None = None
) -> list[RankedMessage]:
    """Analyze a batch of messages and return them in attention order."""
    return sort_by_priority(analyze_messages(messages, now=now))


def select_urgent(
    ranked: Iterable[RankedMessage],
    min_urgency_score: int = DIGEST_MIN_URGENCY,
    limit: int = DIGEST_LIMIT,
) -> list[RankedMessage]:
    """Leading messages of a ranked batch at or above an urgency threshold."""
    selected = [r for r in ranked if r.analysis.urgency_score >= min_urgency_score]
    return selected[:limit]


def summarize_batch(ranked: Iterable[RankedMessage]) -> BatchSummary:
    analyses = [r.analysis for r in ranked]

    priorities = Counter(a.priority for a in analyses)
    categories = Counter(a.category for a in analyses)

    return BatchSummary(
        total=len(analyses),
        by_priority={p: priorities.get(p, 0) for p in PRIORITY_RANK},
        by_category={c: categories.get(c, 0) for c in CATEGORIES},
        urgent_count=priorities.get(PRIORITY_URGENT, 0),
        high_priority_count=priorities.get(PRIORITY_URGENT, 0) + priorities.get(PRIORITY_HIGH, 0),
        action_required_count=sum(1 for a in analyses if a.action_required),
    )
