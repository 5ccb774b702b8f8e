# xfighter/exceptions.py


class XfighterError(Exception):
    """Base class for every error the client reports."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ConnectionError(XfighterError):
    """The request never produced an HTTP response."""

    def __init__(self, reason):
        super().__init__(f"Could not reach the API: {reason}")
        self.reason = reason


class InvalidJSON(XfighterError):
    """The response body could not be decoded as JSON."""

    def __init__(self, body):
        super().__init__(f"Invalid JSON in response body: {body!r}")
        self.body = body


class RequestError(XfighterError):
    """The service answered with ``"ok": false``."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class UnhandledAPIResponse(XfighterError):
    """The service answered with a status or payload we don't handle."""

    def __init__(self, status, body, reason=None):
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Unhandled API response {status}{detail}: {body!r}")
        self.status = status
        self.body = body
        self.reason = reason
