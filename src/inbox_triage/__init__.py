"""Inbox Triage - rank incoming email by urgency and business relevance."""

__version__ = "0.1.0"
