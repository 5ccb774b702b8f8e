from __future__ import annotations

import json

import pytest

from xfighter import client as client_module
from xfighter.client import XfighterClient

BASE_URL = "https://api.example.test/ob/api"


class FakeResponse:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text


class FakeAPI:
    """Stands in for ``requests.request``; records calls and replays one response."""

    def __init__(self) -> None:
        self.calls: list[dict] = []
        self.status = 200
        self.text = json.dumps({"ok": True})
        self.error: Exception | None = None

    def reply(self, body=None, status: int = 200, text: str | None = None) -> None:
        self.status = status
        self.text = text if text is not None else json.dumps(body)

    def fail(self, error: Exception) -> None:
        self.error = error

    @property
    def last(self) -> dict:
        return self.calls[-1]

    def __call__(self, method, url, headers=None, params=None, data=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "params": params,
                "body": json.loads(data) if data is not None else None,
            }
        )
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status, self.text)


@pytest.fixture
def api(monkeypatch: pytest.MonkeyPatch) -> FakeAPI:
    fake = FakeAPI()
    monkeypatch.setattr(client_module.requests, "request", fake)
    return fake


@pytest.fixture
def client() -> XfighterClient:
    return XfighterClient(api_key="secret-key", base_url=BASE_URL)


def order_payload(**overrides) -> dict:
    payload = {
        "ok": True,
        "symbol": "FOO",
        "venue": "TESTEX",
        "direction": "buy",
        "originalQty": 10,
        "qty": 10,
        "price": 100,
        "orderType": "limit",
        "id": 1,
        "account": "EXB123456",
        "ts": "2015-07-05T22:16:18+00:00",
        "fills": [],
        "totalFilled": 0,
        "open": True,
    }
    payload.update(overrides)
    return payload
