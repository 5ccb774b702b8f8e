# xfighter/client.py
import json
from dataclasses import dataclass

import requests
from loguru import logger

from . import config
from .core.result import Err, Ok
from .exceptions import ConnectionError, InvalidJSON, RequestError, UnhandledAPIResponse

METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS", "PATCH")


@dataclass(frozen=True)
class RawResponse:
    method: str
    url: str
    status: int
    body: str


def decode_response(raw, shape=None, expected=(200,)):
    """Classifies a raw response and coerces its payload with ``shape``.

    Returns ``Ok(value)`` or ``Err(error)``. The checks run in order: the body
    must be JSON, the service must not report ``"ok": false``, the status must
    be one of ``expected``, and ``shape`` (if given) must accept the payload.
    HEAD responses have no body and decode to an empty dict.
    """
    if raw.method == "HEAD":
        payload = {}
    else:
        try:
            payload = json.loads(raw.body)
        except ValueError:
            return Err(InvalidJSON(raw.body))

    if isinstance(payload, dict) and payload.get("ok") is False:
        message = payload.get("error") or "request failed"
        logger.info("API reported an error for {} {} ({}): {}", raw.method, raw.url, raw.status, message)
        return Err(RequestError(message, status=raw.status))

    if raw.status not in expected:
        return Err(UnhandledAPIResponse(raw.status, raw.body))

    if shape is None:
        return Ok(payload)
    try:
        return Ok(shape(payload))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        return Err(UnhandledAPIResponse(raw.status, raw.body, reason=f"unexpected payload: {e!r}"))


class XfighterClient:
    def __init__(self, api_key=None, base_url=None, api_key_header=None):
        settings = config.load_settings()
        self.api_key = api_key or settings.api_key
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.api_key_header = api_key_header or settings.api_key_header

    def headers(self):
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers[self.api_key_header] = self.api_key
        return headers

    def request_result(self, method, path, params=None, body=None):
        """Sends one request. Returns ``Ok(RawResponse)`` or ``Err(ConnectionError)``."""
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self.base_url + path
        data = json.dumps(body) if body is not None else None
        try:
            response = requests.request(method, url, headers=self.headers(), params=params, data=data)
        except requests.exceptions.RequestException as e:
            logger.warning("API request failed: {} {}: {}", method, url, e)
            error = ConnectionError(e)
            error.__cause__ = e
            return Err(error)

        logger.debug("{} {} -> {}", method, url, response.status_code)
        return Ok(RawResponse(method=method, url=url, status=response.status_code, body=response.text))

    def request(self, method, path, params=None, body=None):
        return self.request_result(method, path, params=params, body=body).unwrap()

    def call_result(self, method, path, params=None, body=None, shape=None, expected=(200,)):
        """Request plus decode: the single entry point the wrappers go through."""
        return self.request_result(method, path, params=params, body=body).and_then(
            lambda raw: decode_response(raw, shape=shape, expected=expected)
        )

    def call(self, method, path, params=None, body=None, shape=None, expected=(200,)):
        return self.call_result(method, path, params=params, body=body, shape=shape, expected=expected).unwrap()

    def get_result(self, path, params=None, shape=None, expected=(200,)):
        return self.call_result("GET", path, params=params, shape=shape, expected=expected)

    def get(self, path, params=None, shape=None, expected=(200,)):
        return self.get_result(path, params=params, shape=shape, expected=expected).unwrap()

    def delete_result(self, path, params=None, shape=None, expected=(200,)):
        return self.call_result("DELETE", path, params=params, shape=shape, expected=expected)

    def delete(self, path, params=None, shape=None, expected=(200,)):
        return self.delete_result(path, params=params, shape=shape, expected=expected).unwrap()

    def head_result(self, path, params=None, expected=(200,)):
        return self.call_result("HEAD", path, params=params, expected=expected)

    def head(self, path, params=None, expected=(200,)):
        return self.head_result(path, params=params, expected=expected).unwrap()

    def options_result(self, path, params=None, shape=None, expected=(200,)):
        return self.call_result("OPTIONS", path, params=params, shape=shape, expected=expected)

    def options(self, path, params=None, shape=None, expected=(200,)):
        return self.options_result(path, params=params, shape=shape, expected=expected).unwrap()

    def post_result(self, path, body=None, params=None, shape=None, expected=(200,)):
        return self.call_result("POST", path, params=params, body=body, shape=shape, expected=expected)

    def post(self, path, body=None, params=None, shape=None, expected=(200,)):
        return self.post_result(path, body=body, params=params, shape=shape, expected=expected).unwrap()

    def put_result(self, path, body=None, params=None, shape=None, expected=(200,)):
        return self.call_result("PUT", path, params=params, body=body, shape=shape, expected=expected)

    def put(self, path, body=None, params=None, shape=None, expected=(200,)):
        return self.put_result(path, body=body, params=params, shape=shape, expected=expected).unwrap()

    def patch_result(self, path, body=None, params=None, shape=None, expected=(200,)):
        return self.call_result("PATCH", path, params=params, body=body, shape=shape, expected=expected)

    def patch(self, path, body=None, params=None, shape=None, expected=(200,)):
        return self.patch_result(path, body=body, params=params, shape=shape, expected=expected).unwrap()


def get_client(client=None):
    """Returns ``client``, or a fresh one built from the environment."""
    return client if client is not None else XfighterClient()
