"""Scoring and classification of messages."""

from __future__ import annotations

from datetime import datetime, timezone

from .constants import (
    ADMIN_KEYWORDS,
    AUTOMATED_SENDER_PATTERNS,
    BUSINESS_BASE_SCORE,
    BUSINESS_KEYWORDS,
    CATEGORY_ADMIN,
    CATEGORY_FOLLOW_UP,
    CATEGORY_SPAM,
    CATEGORY_STANDARD,
    CATEGORY_URGENT,
    FOLLOW_UP_PHRASES,
    HIGH_PRIORITY_BUSINESS,
    HIGH_PRIORITY_MIN_URGENCY,
    HIGH_PRIORITY_URGENCY,
    LONG_THREAD_MARKER,
    LOW_PRIORITY_BUSINESS,
    LOW_PRIORITY_URGENCY,
    MAX_EXCLAMATION_BONUS,
    PENALTY_AUTOMATED_SENDER,
    PERSONAL_EMAIL_DOMAINS,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    PRIORITY_URGENT,
    RECENT_HOURS,
    SCORE_MAX,
    SCORE_MIN,
    SPAM_INDICATORS,
    SPAM_THRESHOLD,
    STANDARD_CATEGORY_THRESHOLD,
    TRADE_BUSINESS_KEYWORDS,
    TRADE_URGENT_KEYWORDS,
    URGENT_CATEGORY_THRESHOLD,
    URGENT_KEYWORDS,
    URGENT_PRIORITY_THRESHOLD,
    VERY_RECENT_HOURS,
    WEIGHT_BUSINESS_DOMAIN,
    WEIGHT_BUSINESS_KEYWORD,
    WEIGHT_INVOICE_OR_QUOTE,
    WEIGHT_LONG_THREAD,
    WEIGHT_MEETING_OR_APPOINTMENT,
    WEIGHT_MONEY_AND_FREE,
    WEIGHT_NOREPLY_CLICK_HERE,
    WEIGHT_PAYMENT_OR_OVERDUE,
    WEIGHT_PER_EXCLAMATION,
    WEIGHT_RECENT,
    WEIGHT_SPAM_INDICATOR,
    WEIGHT_SUBJECT_ALL_CAPS,
    WEIGHT_SUBJECT_EXCLAMATION,
    WEIGHT_TRADE_BUSINESS_KEYWORD,
    WEIGHT_TRADE_URGENT_KEYWORD,
    WEIGHT_URGENT_KEYWORD,
    WEIGHT_VERY_RECENT,
)
from .models import Message, Signals


def _clamp(score: int) -> int:
    return min(SCORE_MAX, max(SCORE_MIN, score))


def _count_matches(content: str, lexicon: tuple[str, ...]) -> int:
    """Number of lexicon entries present in content (each entry counted once)."""
    return sum(1 for keyword in lexicon if keyword in content)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def extract_signals(message: Message, now: datetime | None = None) -> Signals:
    """Build the lower-cased content blob, sender domain and message age.

    Missing fields degrade to empty strings; a missing date counts as
    just received (zero hours old).
    """
    content = " ".join(
        [message.subject or "", message.snippet or "", message.body_preview or ""]
    ).lower()

    sender = message.sender or ""
    _, at, domain = sender.rpartition("@")
    from_domain = domain.strip().rstrip(">").strip().lower() if at else ""

    hours_old = 0.0
    if message.date is not None:
        now = _as_utc(now or datetime.now(timezone.utc))
        hours_old = (now - _as_utc(message.date)).total_seconds() / 3600

    return Signals(content=content, from_domain=from_domain, hours_old=hours_old)


def calculate_urgency_score(signals: Signals, message: Message) -> int:
    """Score how urgently a message needs attention, from 0 to 100."""
    content = signals.content
    subject = message.subject or ""
    sender = message.sender or ""

    total = _count_matches(content, URGENT_KEYWORDS) * WEIGHT_URGENT_KEYWORD
    total += _count_matches(content, TRADE_URGENT_KEYWORDS) * WEIGHT_TRADE_URGENT_KEYWORD

    if signals.hours_old < VERY_RECENT_HOURS:
        total += WEIGHT_VERY_RECENT
    if signals.hours_old < RECENT_HOURS:
        total += WEIGHT_RECENT

    if "!" in subject:
        total += WEIGHT_SUBJECT_EXCLAMATION
    if subject.upper() == subject:
        total += WEIGHT_SUBJECT_ALL_CAPS
    # Long reply chain. Checked literally on the doubled prefix.
    if LONG_THREAD_MARKER in subject:
        total += WEIGHT_LONG_THREAD

    if any(pattern in sender for pattern in AUTOMATED_SENDER_PATTERNS):
        total -= PENALTY_AUTOMATED_SENDER

    return _clamp(total)


def calculate_business_relevance(signals: Signals) -> int:
    """Score how likely a message is genuine business correspondence, from 0 to 100."""
    content = signals.content

    total = BUSINESS_BASE_SCORE
    total += _count_matches(content, BUSINESS_KEYWORDS) * WEIGHT_BUSINESS_KEYWORD
    total += _count_matches(content, TRADE_BUSINESS_KEYWORDS) * WEIGHT_TRADE_BUSINESS_KEYWORD

    if signals.from_domain and signals.from_domain not in PERSONAL_EMAIL_DOMAINS:
        total += WEIGHT_BUSINESS_DOMAIN

    # Transactional language is weighted on top of the lexicon hits.
    if "invoice" in content or "quote" in content:
        total += WEIGHT_INVOICE_OR_QUOTE
    if "meeting" in content or "appointment" in content:
        total += WEIGHT_MEETING_OR_APPOINTMENT
    if "payment" in content or "overdue" in content:
        total += WEIGHT_PAYMENT_OR_OVERDUE

    return _clamp(total)


def calculate_spam_score(signals: Signals, message: Message) -> int:
    """Score spam likelihood, from 0 to 100."""
    content = signals.content
    sender = message.sender or ""

    total = _count_matches(content, SPAM_INDICATORS) * WEIGHT_SPAM_INDICATOR
    total += min(MAX_EXCLAMATION_BONUS, content.count("!") * WEIGHT_PER_EXCLAMATION)

    if "noreply@" in sender and "click here" in content:
        total += WEIGHT_NOREPLY_CLICK_HERE
    if "$" in content and "free" in content:
        total += WEIGHT_MONEY_AND_FREE

    return _clamp(total)


def determine_category(
    content: str, urgency_score: int, business_relevance: int, spam_score: int
) -> str:
    """Classify a message into a category; the first matching rule wins."""
    if spam_score > SPAM_THRESHOLD:
        return CATEGORY_SPAM
    if urgency_score > URGENT_CATEGORY_THRESHOLD:
        return CATEGORY_URGENT
    if business_relevance > STANDARD_CATEGORY_THRESHOLD:
        return CATEGORY_STANDARD
    if any(phrase in content for phrase in FOLLOW_UP_PHRASES):
        return CATEGORY_FOLLOW_UP
    if any(keyword in content for keyword in ADMIN_KEYWORDS):
        return CATEGORY_ADMIN
    return CATEGORY_STANDARD


def determine_priority(urgency_score: int, business_relevance: int, category: str) -> str:
    """Derive the attention priority from category and scores."""
    if category == CATEGORY_URGENT or urgency_score > URGENT_PRIORITY_THRESHOLD:
        return PRIORITY_URGENT
    if urgency_score > HIGH_PRIORITY_URGENCY or (
        business_relevance > HIGH_PRIORITY_BUSINESS and urgency_score > HIGH_PRIORITY_MIN_URGENCY
    ):
        return PRIORITY_HIGH
    if urgency_score < LOW_PRIORITY_URGENCY and business_relevance < LOW_PRIORITY_BUSINESS:
        return PRIORITY_LOW
    return PRIORITY_MEDIUM
