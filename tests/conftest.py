"""Shared fixtures for LogLens tests."""

import base64
import json

import pytest


def encode_payload(data) -> str:
    """Return a 'BASE64:' log line carrying the JSON form of data."""
    blob = base64.b64encode(json.dumps(data).encode('utf-8')).decode('ascii')
    return f"BASE64:{blob}"


@pytest.fixture
def purchase_event():
    return {
        "timestamp": "2024-01-01T10:05:00.000",
        "user": "alice",
        "event": "purchase",
        "details": {"item_id": "A-100", "quantity": 2, "price": 19.99},
        "ip": "10.0.0.1",
    }


@pytest.fixture
def mixed_log(purchase_event):
    lines = [
        "2024-01-01T10:00:00.000 NullPointerException at com.example.Cart.add",
        "2024-01-01T10:01:00.000 INFO service started",
        json.dumps({"timestamp": "2024-01-01T10:02:00.000", "user": "bob",
                    "event": "login", "ip": "10.0.0.2"}),
        encode_payload(purchase_event),
        "2024-01-02T09:00:00.000 Error while writing cache",
        "BASE64:not-valid-base64!!",
        "{broken json",
        "",
    ]
    return "\n".join(lines)
