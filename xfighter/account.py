# xfighter/account.py
from .client import get_client
from .core.models import AccountStatus
from .core.utils import api_path


def status_result(account, venue, client=None):
    return get_client(client).get_result(
        api_path("venues", venue, "accounts", account, "orders"),
        shape=lambda payload: AccountStatus.from_json(payload, account=account),
    )


def status(account, venue, client=None):
    """Every order ``account`` holds on ``venue``."""
    return status_result(account, venue, client=client).unwrap()


def orders_result(account, venue, symbol=None, client=None):
    if symbol is None:
        path = api_path("venues", venue, "accounts", account, "orders")
    else:
        path = api_path("venues", venue, "accounts", account, "stocks", symbol, "orders")
    return get_client(client).get_result(
        path,
        shape=lambda payload: list(AccountStatus.from_json(payload, account=account).orders),
    )


def orders(account, venue, symbol=None, client=None):
    """Orders of ``account`` on ``venue``, optionally only those for ``symbol``."""
    return orders_result(account, venue, symbol=symbol, client=client).unwrap()
