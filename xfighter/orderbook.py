# xfighter/orderbook.py
from .client import get_client
from .core.models import Orderbook
from .core.utils import api_path


def state_result(venue, symbol, client=None):
    return get_client(client).get_result(api_path("venues", venue, "stocks", symbol), shape=Orderbook.from_json)


def state(venue, symbol, client=None):
    """Snapshot of the bids and asks for ``symbol`` on ``venue``."""
    return state_result(venue, symbol, client=client).unwrap()
