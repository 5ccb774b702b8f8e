# xfighter/stock.py
import builtins

from loguru import logger

from .client import get_client
from .core.models import Direction, Order, OrderRequest, OrderType, Quote, Symbol
from .core.utils import api_path, format_price


# ``list`` below is part of the public API; the builtin is reached through ``builtins``.
def list_result(venue, client=None):
    return get_client(client).get_result(
        api_path("venues", venue, "stocks"),
        shape=lambda payload: builtins.list(Symbol.from_json(s) for s in payload["symbols"]),
    )


def list(venue, client=None):
    """Symbols traded on ``venue``."""
    return list_result(venue, client=client).unwrap()


def quote_result(venue, symbol, client=None):
    return get_client(client).get_result(
        api_path("venues", venue, "stocks", symbol, "quote"), shape=Quote.from_json
    )


def quote(venue, symbol, client=None):
    return quote_result(venue, symbol, client=client).unwrap()


def _order_type(order_type):
    if isinstance(order_type, OrderType):
        return order_type
    try:
        return OrderType(order_type)
    except ValueError:
        valid = ", ".join(t.value for t in OrderType)
        raise ValueError(f"Invalid order type {order_type!r}, expected one of: {valid}") from None


def _place_result(direction, account, venue, symbol, price, qty, order_type, client):
    order_type = _order_type(order_type)
    if qty <= 0:
        raise ValueError(f"Order quantity must be positive, got {qty}")
    if price < 0:
        raise ValueError(f"Order price must not be negative, got {price}")

    request = OrderRequest(
        account=account,
        venue=venue,
        symbol=symbol,
        price=price,
        quantity=qty,
        direction=direction,
        order_type=order_type,
    )
    logger.info(
        "{} {} {} x{} @ {} ({}) for {}",
        direction.value, venue, symbol, qty, format_price(price), order_type.value, account,
    )
    return get_client(client).post_result(
        api_path("venues", venue, "stocks", symbol, "orders"),
        body=request.to_json(),
        shape=Order.from_json,
    )


def buy_result(account, venue, symbol, price, qty, order_type=OrderType.LIMIT, client=None):
    """Places a buy order and returns ``Ok(Order)`` or ``Err(error)``.

    Service and transport failures come back as ``Err``. Bad arguments (an
    unknown ``order_type``, a non-positive ``qty`` or a negative ``price``)
    are caller mistakes and raise ``ValueError`` before any request is sent,
    here and in ``sell_result``.
    """
    return _place_result(Direction.BUY, account, venue, symbol, price, qty, order_type, client)


def buy(account, venue, symbol, price, qty, order_type=OrderType.LIMIT, client=None):
    """Places a buy order. ``price`` is in cents; ``order_type`` may be an OrderType or its name."""
    return buy_result(account, venue, symbol, price, qty, order_type, client=client).unwrap()


def sell_result(account, venue, symbol, price, qty, order_type=OrderType.LIMIT, client=None):
    return _place_result(Direction.SELL, account, venue, symbol, price, qty, order_type, client)


def sell(account, venue, symbol, price, qty, order_type=OrderType.LIMIT, client=None):
    return sell_result(account, venue, symbol, price, qty, order_type, client=client).unwrap()
