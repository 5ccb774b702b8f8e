from __future__ import annotations

import json

import pytest
from hypothesis import given, strategies as st

from xfighter.client import RawResponse, decode_response
from xfighter.core.models import AccountStatus, Order, Quote
from xfighter.exceptions import InvalidJSON, RequestError, UnhandledAPIResponse

from conftest import order_payload


def raw(body: str, status: int = 200, method: str = "GET") -> RawResponse:
    return RawResponse(method=method, url="https://api.example.test/ob/api/x", status=status, body=body)


def _not_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return True
    return False


@given(body=st.text().filter(_not_json), status=st.sampled_from([200, 400, 404, 500]))
def test_malformed_json_is_invalid_json(body, status):
    result = decode_response(raw(body, status))
    assert not result.is_ok
    assert isinstance(result.error, InvalidJSON)
    assert result.error.body == body
    with pytest.raises(InvalidJSON):
        result.unwrap()


@given(message=st.text(min_size=1), status=st.sampled_from([200, 400, 401, 404, 500]))
def test_ok_false_is_request_error_with_service_message(message, status):
    body = json.dumps({"ok": False, "error": message})
    with pytest.raises(RequestError) as excinfo:
        decode_response(raw(body, status)).unwrap()
    assert excinfo.value.message == message
    assert excinfo.value.status == status


@given(status=st.integers(min_value=100, max_value=599).filter(lambda s: s not in (200, 400)))
def test_unexpected_status_is_unhandled(status):
    body = json.dumps({"ok": True})
    result = decode_response(raw(body, status), expected=(200, 400))
    assert isinstance(result.error, UnhandledAPIResponse)
    assert result.error.status == status
    assert result.error.body == body


def test_expected_status_returns_payload():
    result = decode_response(raw('{"ok": true, "venue": "TESTEX"}', 400), expected=(200, 400))
    assert result.is_ok
    assert result.unwrap() == {"ok": True, "venue": "TESTEX"}


def test_ok_false_without_message():
    result = decode_response(raw('{"ok": false}'))
    assert isinstance(result.error, RequestError)
    assert result.error.message == "request failed"


def test_shape_coerces_payload():
    body = json.dumps({"ok": True, "symbol": "FOO", "venue": "TESTEX", "bidSize": 3})
    quote = decode_response(raw(body), shape=Quote.from_json).unwrap()
    assert isinstance(quote, Quote)
    assert quote.bid_size == 3
    assert quote.bid is None


def test_shape_mismatch_is_unhandled():
    result = decode_response(raw('{"ok": true, "venue": "TESTEX"}'), shape=Quote.from_json)
    assert isinstance(result.error, UnhandledAPIResponse)
    assert "symbol" in result.error.reason


def test_head_has_no_body():
    assert decode_response(raw("", method="HEAD")).unwrap() == {}


def test_non_object_payload_passes_through():
    assert decode_response(raw("[1, 2]")).unwrap() == [1, 2]


@pytest.mark.parametrize(
    "shape, body",
    [
        (Order.from_json, "[1, 2]"),
        (Order.from_json, '"oops"'),
        (Order.from_json, json.dumps(order_payload(ts=12345))),
        (Order.from_json, json.dumps(order_payload(fills=["x"]))),
        (AccountStatus.from_json, json.dumps({"ok": True, "venue": "TESTEX", "orders": ["x"]})),
        (AccountStatus.from_json, "[1, 2]"),
        (AccountStatus.from_json, '"oops"'),
    ],
)
def test_wrong_payload_types_are_unhandled(shape, body):
    result = decode_response(raw(body), shape=shape)
    assert isinstance(result.error, UnhandledAPIResponse)
    assert result.error.body == body
    with pytest.raises(UnhandledAPIResponse):
        result.unwrap()
