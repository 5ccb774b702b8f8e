# xfighter/core/models.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from .utils import parse_timestamp


class Direction(Enum):
    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    LIMIT = "limit"
    MARKET = "market"
    FILL_OR_KILL = "fill-or-kill"
    IMMEDIATE_OR_CANCEL = "immediate-or-cancel"

    @classmethod
    def _missing_(cls, value):
        aliases = {"fok": cls.FILL_OR_KILL, "ioc": cls.IMMEDIATE_OR_CANCEL}
        if not isinstance(value, str):
            return None
        value = value.strip().lower()
        for member in cls:
            if member.value == value:
                return member
        return aliases.get(value)


class OrderStatus(Enum):
    OPEN = "open"
    FILLED = "filled"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Fill:
    price: int
    quantity: int
    timestamp: datetime

    @classmethod
    def from_json(cls, payload):
        return cls(
            price=payload["price"],
            quantity=payload["qty"],
            timestamp=parse_timestamp(payload["ts"]),
        )


@dataclass(frozen=True)
class Order:
    id: int
    account: str
    venue: str
    symbol: str
    direction: Direction
    order_type: OrderType
    quantity: int
    remaining: int
    price: int
    status: OrderStatus
    fills: Tuple[Fill, ...]
    total_filled: int
    timestamp: Optional[datetime]

    @classmethod
    def from_json(cls, payload):
        remaining = payload.get("qty", 0)
        quantity = payload.get("originalQty", remaining)
        total_filled = payload.get("totalFilled", 0)
        if payload.get("open", False):
            status = OrderStatus.OPEN
        elif total_filled >= quantity:
            status = OrderStatus.FILLED
        else:
            status = OrderStatus.CANCELLED
        return cls(
            id=payload["id"],
            account=payload.get("account"),
            venue=payload["venue"],
            symbol=payload["symbol"],
            direction=Direction(payload["direction"]),
            order_type=OrderType(payload["orderType"]),
            quantity=quantity,
            remaining=remaining,
            price=payload.get("price", 0),
            status=status,
            fills=tuple(Fill.from_json(fill) for fill in payload.get("fills") or ()),
            total_filled=total_filled,
            timestamp=parse_timestamp(payload.get("ts")),
        )


@dataclass(frozen=True)
class OrderRequest:
    account: str
    venue: str
    symbol: str
    price: int
    quantity: int
    direction: Direction
    order_type: OrderType

    def to_json(self):
        return {
            "account": self.account,
            "venue": self.venue,
            "stock": self.symbol,
            "price": self.price,
            "qty": self.quantity,
            "direction": self.direction.value,
            "orderType": self.order_type.value,
        }


@dataclass(frozen=True)
class Quote:
    symbol: str
    venue: str
    bid: Optional[int]
    ask: Optional[int]
    bid_size: int
    ask_size: int
    bid_depth: int
    ask_depth: int
    last: Optional[int]
    last_size: Optional[int]
    last_trade: Optional[datetime]
    quote_time: Optional[datetime]

    @classmethod
    def from_json(cls, payload):
        return cls(
            symbol=payload["symbol"],
            venue=payload["venue"],
            bid=payload.get("bid"),
            ask=payload.get("ask"),
            bid_size=payload.get("bidSize", 0),
            ask_size=payload.get("askSize", 0),
            bid_depth=payload.get("bidDepth", 0),
            ask_depth=payload.get("askDepth", 0),
            last=payload.get("last"),
            last_size=payload.get("lastSize"),
            last_trade=parse_timestamp(payload.get("lastTrade")),
            quote_time=parse_timestamp(payload.get("quoteTime")),
        )


@dataclass(frozen=True)
class OrderbookEntry:
    price: int
    qty: int
    is_buy: bool

    @classmethod
    def from_json(cls, payload):
        return cls(price=payload["price"], qty=payload["qty"], is_buy=payload["isBuy"])


@dataclass(frozen=True)
class Orderbook:
    symbol: str
    venue: str
    bids: Tuple[OrderbookEntry, ...]
    asks: Tuple[OrderbookEntry, ...]
    timestamp: Optional[datetime]

    @classmethod
    def from_json(cls, payload):
        return cls(
            symbol=payload["symbol"],
            venue=payload["venue"],
            bids=tuple(OrderbookEntry.from_json(e) for e in payload.get("bids") or ()),
            asks=tuple(OrderbookEntry.from_json(e) for e in payload.get("asks") or ()),
            timestamp=parse_timestamp(payload.get("ts")),
        )


@dataclass(frozen=True)
class AccountStatus:
    account: str
    venue: str
    orders: Tuple[Order, ...]

    @classmethod
    def from_json(cls, payload, account=None):
        orders = tuple(Order.from_json(order) for order in payload["orders"])
        return cls(account=account, venue=payload["venue"], orders=orders)


@dataclass(frozen=True)
class Symbol:
    name: str
    symbol: str

    @classmethod
    def from_json(cls, payload):
        return cls(name=payload["name"], symbol=payload["symbol"])
