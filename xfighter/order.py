# xfighter/order.py
from loguru import logger

from .client import get_client
from .core.models import Order
from .core.utils import api_path


def _order_path(venue, symbol, order_id):
    return api_path("venues", venue, "stocks", symbol, "orders", order_id)


def status_result(venue, account, symbol, order_id, client=None):
    # Orders are addressed by venue, symbol and id; the account is informational.
    logger.debug("status of order {} on {}/{} for {}", order_id, venue, symbol, account)
    return get_client(client).get_result(_order_path(venue, symbol, order_id), shape=Order.from_json)


def status(venue, account, symbol, order_id, client=None):
    return status_result(venue, account, symbol, order_id, client=client).unwrap()


def status_of_result(order, client=None):
    return status_result(order.venue, order.account, order.symbol, order.id, client=client)


def status_of(order, client=None):
    """Fetches a fresh copy of ``order``."""
    return status_of_result(order, client=client).unwrap()


def cancel_result(venue, account, symbol, order_id, client=None):
    logger.info("cancelling order {} on {}/{} for {}", order_id, venue, symbol, account)
    return get_client(client).delete_result(_order_path(venue, symbol, order_id), shape=Order.from_json)


def cancel(venue, account, symbol, order_id, client=None):
    """Cancels an order and returns it as the service reports it afterwards."""
    return cancel_result(venue, account, symbol, order_id, client=client).unwrap()


def cancel_order_result(order, client=None):
    return cancel_result(order.venue, order.account, order.symbol, order.id, client=client)


def cancel_order(order, client=None):
    return cancel_order_result(order, client=client).unwrap()
