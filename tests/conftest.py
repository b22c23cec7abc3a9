"""Shared fixtures for tests."""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone

import pytest

from inbox_triage.models import Message

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)
TWO_DAYS_AGO = NOW - timedelta(days=2)
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def outage_message() -> Message:
    return Message(
        message_id="msg_urgent_001",
        sender="Facilities <facilities@westfield.com.au>",
        subject="URGENT: Power outage at Westfield",
        snippet="",
        body_preview=(
            "Emergency at the Westfield site - no power to the tenancy, "
            "need someone immediately, critical."
        ),
        date=NOW - timedelta(minutes=30),
    )


@pytest.fixture
def invoice_message() -> Message:
    return Message(
        message_id="msg_invoice_001",
        sender="Accounts <accounts@smithbuilders.com.au>",
        subject="Invoice INV-2041",
        body_preview=(
            "Please find attached our invoice for the kitchen renovation, "
            "payment due in 14 days"
        ),
        date=TWO_DAYS_AGO,
    )


@pytest.fixture
def spam_message() -> Message:
    return Message(
        message_id="msg_spam_001",
        sender="Prize Desk <noreply@promo-blast.biz>",
        subject="",
        body_preview="FREE!!! You are a WINNER! Click here to claim your $1000 guarantee!!!",
        date=TWO_DAYS_AGO,
    )


@pytest.fixture
def empty_message() -> Message:
    return Message(date=EPOCH)


@pytest.fixture
def sample_messages(invoice_message, outage_message, spam_message, empty_message) -> list[Message]:
    return [invoice_message, outage_message, spam_message, empty_message]


# --- Fake Gmail service ---


def encode_body(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii")


def make_resource(msg_id: str, sender: str, subject: str, body: str, internal_date: int) -> dict:
    return {
        "id": msg_id,
        "snippet": body[:40],
        "internalDate": str(internal_date),
        "payload": {
            "mimeType": "multipart/alternative",
            "headers": [
                {"name": "From", "value": sender},
                {"name": "Subject", "value": subject},
            ],
            "parts": [
                {"mimeType": "text/plain", "body": {"data": encode_body(body)}},
                {"mimeType": "text/html", "body": {"data": encode_body(f"<p>{body}</p>")}},
            ],
        },
    }


class _Request:
    def __init__(self, result=None, msg_id=None):
        self.result = result
        self.msg_id = msg_id

    def execute(self):
        return self.result


class _Batch:
    def __init__(self, resources: dict):
        self._resources = resources
        self._calls = []

    def add(self, request, callback):
        self._calls.append((request, callback))

    def execute(self):
        for request, callback in self._calls:
            resource = self._resources.get(request.msg_id)
            if resource is None:
                callback(request.msg_id, None, RuntimeError("not found"))
            else:
                callback(request.msg_id, resource, None)


class _Messages:
    def __init__(self, pages: list[list[str]], resources: dict):
        self._pages = pages
        self._resources = resources
        self.list_calls: list[dict] = []

    def list(self, **kwargs):
        self.list_calls.append(kwargs)
        index = int(kwargs.get("pageToken", 0))
        resp = {"messages": [{"id": i} for i in self._pages[index]]}
        if index + 1 < len(self._pages):
            resp["nextPageToken"] = str(index + 1)
        return _Request(resp)

    def get(self, userId, id, format):  # noqa: A002
        return _Request(msg_id=id)


class _Users:
    def __init__(self, messages: _Messages):
        self._messages = messages

    def messages(self):
        return self._messages


class FakeGmailService:
    """Just enough of the Gmail discovery client for listing and batch fetches."""

    def __init__(self, pages: list[list[str]], resources: dict | None = None):
        self.messages = _Messages(pages, resources or {})
        self._resources = resources or {}

    def users(self):
        return _Users(self.messages)

    def new_batch_http_request(self):
        return _Batch(self._resources)


@pytest.fixture
def fake_service() -> FakeGmailService:
    recent_ms = int(NOW.timestamp() * 1000)
    resources = {
        "a": make_resource(
            "a", "Site Manager <ops@harbourfreight.com>", "Burst pipe in loading dock",
            "There is a burst pipe and a flood in the loading dock, emergency, please call asap",
            recent_ms,
        ),
        "b": make_resource(
            "b", "Newsletter <news@tradeweekly.com>", "Monthly newsletter",
            "Your monthly newsletter and industry report", recent_ms,
        ),
        "c": make_resource(
            "c", "Jo <jo@gmail.com>", "Quote request",
            "Could you send a quote for a bathroom renovation?", recent_ms,
        ),
    }
    return FakeGmailService(pages=[["a", "b"], ["c", "missing"]], resources=resources)
