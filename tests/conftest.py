from __future__ import annotations

import json
from typing import Any

import pytest

from pawapay_connect.exceptions import TransportError
from pawapay_connect.gateway.base import RawResponse
from pawapay_connect.gateway.client import PawapayClient

DEPOSIT_ID = "8917c345-4791-4285-a416-62f24b6982db"


def json_response(payload: Any, status_code: int = 200) -> RawResponse:
    return RawResponse(status_code=status_code, body=json.dumps(payload).encode())


def http_error(status_code: int, payload: Any = None) -> TransportError:
    body = json.dumps(payload).encode() if payload is not None else b""
    return TransportError(f"HTTP {status_code}", status_code=status_code, body=body)


class StubTransport:
    """Replays queued responses (or raises queued errors) and records every call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    async def execute(self, method, path, json_body=None):
        self.calls.append({"method": method, "path": path, "json": json_body})
        if not self.responses:
            raise AssertionError(f"unexpected call {method} {path}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def deposit_id() -> str:
    return DEPOSIT_ID


@pytest.fixture
def make_client():
    def _make(*responses):
        transport = StubTransport(*responses)
        return PawapayClient(transport), transport

    return _make


@pytest.fixture
def deposit_payload() -> dict[str, Any]:
    return {
        "depositId": DEPOSIT_ID,
        "payer": {
            "type": "MMO",
            "accountDetails": {"phoneNumber": "+260763456789", "provider": "MTN_MOMO_ZMB"},
        },
        "amount": "15.50",
        "currency": "ZMW",
    }


@pytest.fixture
def found_body() -> dict[str, Any]:
    return {
        "status": "FOUND",
        "data": {
            "depositId": DEPOSIT_ID,
            "status": "COMPLETED",
            "amount": "15.50",
            "currency": "ZMW",
            "country": "ZMB",
            "payer": {
                "type": "MMO",
                "accountDetails": {"phoneNumber": "260763456789", "provider": "MTN_MOMO_ZMB"},
            },
            "customerMessage": "Order 42",
            "created": "2025-01-01T10:00:00Z",
            "providerTransactionId": "ABC123",
            "metadata": [{"orderId": "42"}],
        },
    }
