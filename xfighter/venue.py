# xfighter/venue.py
from .client import get_client
from .core.result import Ok
from .core.utils import api_path
from .exceptions import RequestError


def up_or_down(result):
    """Turns a heartbeat result into Ok(True) / Ok(False).

    ``ok: false`` means the service is down; other errors are passed on.
    """
    if not result.is_ok and isinstance(result.error, RequestError):
        return Ok(False)
    return result.map(lambda payload: True)


def heartbeat_result(venue, client=None):
    result = get_client(client).get_result(api_path("venues", venue, "heartbeat"))
    return up_or_down(result)


def heartbeat(venue, client=None):
    """Whether ``venue`` is up."""
    return heartbeat_result(venue, client=client).unwrap()
