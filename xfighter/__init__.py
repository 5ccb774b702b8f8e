# xfighter/__init__.py
from loguru import logger

from . import account, order, orderbook, stock, venue
from .client import RawResponse, XfighterClient, decode_response, get_client
from .core.models import (
    AccountStatus,
    Direction,
    Fill,
    Order,
    Orderbook,
    OrderbookEntry,
    OrderRequest,
    OrderStatus,
    OrderType,
    Quote,
    Symbol,
)
from .core.result import Err, Ok
from .exceptions import (
    ConnectionError,
    InvalidJSON,
    RequestError,
    UnhandledAPIResponse,
    XfighterError,
)

# Silent unless the application calls logger.enable("xfighter").
logger.disable("xfighter")


def heartbeat_result(client=None):
    return venue.up_or_down(get_client(client).get_result("/heartbeat"))


def heartbeat(client=None):
    """Whether the API itself is up."""
    return heartbeat_result(client=client).unwrap()


__all__ = [
    "account",
    "order",
    "orderbook",
    "stock",
    "venue",
    "heartbeat",
    "heartbeat_result",
    "XfighterClient",
    "RawResponse",
    "decode_response",
    "get_client",
    "Ok",
    "Err",
    "AccountStatus",
    "Direction",
    "Fill",
    "Order",
    "Orderbook",
    "OrderbookEntry",
    "OrderRequest",
    "OrderStatus",
    "OrderType",
    "Quote",
    "Symbol",
    "XfighterError",
    "ConnectionError",
    "InvalidJSON",
    "RequestError",
    "UnhandledAPIResponse",
]
