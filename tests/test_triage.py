"""Tests for the mailbox triage orchestration."""

from conftest import FakeGmailService

from inbox_triage.triage import triage_mailbox


def test_triage_mailbox_ranks_fetched_messages(fake_service):
    """Fetched mail is ranked with the burst pipe first."""
    ranked = triage_mailbox(fake_service, max_results=10)
    assert len(ranked) == 3
    assert ranked[0].message.message_id == "a"
    assert ranked[0].analysis.priority == "urgent"
    categories = {r.message.message_id: r.analysis.category for r in ranked}
    assert categories["b"] == "admin"


def test_triage_mailbox_empty():
    """An empty mailbox ranks to nothing."""
    service = FakeGmailService(pages=[[]])
    assert triage_mailbox(service) == []
