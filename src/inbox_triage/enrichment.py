"""Enrichment of scored messages: keywords, sentiment, actions and reasoning."""

from __future__ import annotations

import math
import re

from .constants import (
    ACTION_WORDS,
    CATEGORY_ADMIN,
    CATEGORY_FOLLOW_UP,
    CATEGORY_SPAM,
    CATEGORY_STANDARD,
    CATEGORY_URGENT,
    COMMERCIAL_INDICATORS,
    JOB_VALUE_CEILING,
    KEYWORD_LEXICONS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    RESIDENTIAL_INDICATORS,
    STANDARD_CATEGORY_THRESHOLD,
    URGENT_CATEGORY_THRESHOLD,
    WORDS_PER_MINUTE,
)

_AMOUNT = r"((?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d{1,2})?)"

_JOB_VALUE_PATTERNS = (
    re.compile(r"\$\s?" + _AMOUNT),
    re.compile(_AMOUNT + r"\s*dollars?\b"),
    re.compile(r"quote[^\d$]{0,40}" + _AMOUNT),
)


def extract_keywords(content: str) -> tuple[str, ...]:
    """Return every lexicon entry found in content.

    A term listed in two lexicons is reported once for each.
    """
    return tuple(
        keyword
        for lexicon in KEYWORD_LEXICONS.values()
        for keyword in lexicon
        if keyword in content
    )


def analyze_sentiment(content: str) -> str:
    positive = sum(1 for word in POSITIVE_WORDS if word in content)
    negative = sum(1 for word in NEGATIVE_WORDS if word in content)

    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"


def requires_action(content: str, category: str) -> bool:
    """True when the message is urgent, asks for something, or asks a question."""
    if category == CATEGORY_URGENT:
        return True
    return any(word in content for word in ACTION_WORDS) or "?" in content


def estimate_read_time(content: str) -> int:
    """Reading time in whole minutes, never less than one."""
    return max(1, math.ceil(len(content.split()) / WORDS_PER_MINUTE))


def suggest_actions(category: str, urgency_score: int, action_required: bool) -> tuple[str, ...]:
    actions: list[str] = []

    if category == CATEGORY_URGENT or urgency_score > URGENT_CATEGORY_THRESHOLD:
        actions += ["Respond immediately", "Call if necessary"]
    elif category == CATEGORY_STANDARD and action_required:
        actions += ["Respond within 24 hours", "Add to calendar if scheduling required"]
    elif category == CATEGORY_FOLLOW_UP:
        actions += ["Check previous correspondence", "Provide requested update"]
    elif category == CATEGORY_ADMIN:
        actions += ["File for records", "Review when convenient"]

    if category == CATEGORY_SPAM:
        actions += ["Mark as spam", "Block sender if needed"]

    return tuple(actions)


def build_reasoning(
    category: str, priority: str, urgency_score: int, business_relevance: int
) -> str:
    """Short human-readable justification for the category and priority."""
    sentences = [f"Categorized as {category} with {priority} priority."]

    if urgency_score > URGENT_CATEGORY_THRESHOLD:
        sentences.append(
            f"High urgency score ({urgency_score}) due to urgent keywords or time sensitivity."
        )
    if business_relevance > STANDARD_CATEGORY_THRESHOLD:
        sentences.append(
            f"High business relevance ({business_relevance}) based on content and sender."
        )

    if category == CATEGORY_URGENT:
        sentences.append("Contains urgent indicators requiring immediate attention.")
    elif category == CATEGORY_SPAM:
        sentences.append("Contains spam indicators and should be reviewed carefully.")

    return " ".join(sentences)


def detect_customer_type(sender: str, content: str) -> str:
    """Guess whether the correspondent is a business or a household."""
    sender = (sender or "").lower()
    if any(word in sender or word in content for word in COMMERCIAL_INDICATORS):
        return "business"
    if any(word in content for word in RESIDENTIAL_INDICATORS):
        return "residential"
    return "unknown"


def extract_job_value(content: str) -> float | None:
    """Largest plausible dollar amount mentioned in content, if any."""
    best = 0.0
    for pattern in _JOB_VALUE_PATTERNS:
        for match in pattern.finditer(content):
            value = float(match.group(1).replace(",", ""))
            if best < value < JOB_VALUE_CEILING:
                best = value
    return best or None
