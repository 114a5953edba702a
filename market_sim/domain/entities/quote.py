"""
Domain entities for quotes, candles and order-book depth.
Zero external dependencies: pure Python dataclasses only.

Records are frozen: every update produces a new record that replaces the old
one wholesale, so a reader never sees fields from two different updates.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from market_sim.domain.entities.catalog_entry import INDEX_SECTOR

SIMULATED_SPREAD = 0.0005
LIVE_SPREAD = 0.0002


def round_price(value: float) -> float:
    return round(float(value), 2)


@dataclass(frozen=True)
class Quote:
    symbol: str
    name: str
    sector: str
    price: float
    previous_close: float
    open: float
    high: float
    low: float
    volume: int
    change: float
    change_percent: float
    bid: float
    ask: float
    bid_size: int
    ask_size: int
    last_updated: int
    spread: float = field(default=SIMULATED_SPREAD, repr=False)

    @property
    def is_index(self) -> bool:
        return self.sector == INDEX_SECTOR

    @classmethod
    def create(
        cls,
        symbol: str,
        name: str,
        sector: str,
        price: float,
        previous_close: float,
        open: float,
        high: float,
        low: float,
        volume: int,
        bid_size: int,
        ask_size: int,
        last_updated: int,
        spread: float = SIMULATED_SPREAD,
    ) -> "Quote":
        """Build a quote, deriving change, change percent and bid/ask from *price*.

        *high* and *low* are widened to include *price*.
        """
        price = round_price(price)
        change = price - previous_close
        return cls(
            symbol=symbol,
            name=name,
            sector=sector,
            price=price,
            previous_close=previous_close,
            open=round_price(open),
            high=max(round_price(high), price),
            low=min(round_price(low), price),
            volume=int(volume),
            change=change,
            change_percent=(change / previous_close * 100) if previous_close else 0.0,
            bid=round_price(price * (1 - spread)),
            ask=round_price(price * (1 + spread)),
            bid_size=int(bid_size),
            ask_size=int(ask_size),
            last_updated=int(last_updated),
            spread=spread,
        )

    def with_price(
        self,
        price: float,
        volume: int,
        bid_size: int,
        ask_size: int,
        last_updated: int,
    ) -> "Quote":
        """Return a new quote moved to *price*; high/low only ever widen."""
        price = round_price(price)
        change = price - self.previous_close
        return replace(
            self,
            price=price,
            high=max(self.high, price),
            low=min(self.low, price),
            volume=int(volume),
            change=change,
            change_percent=(change / self.previous_close * 100) if self.previous_close else 0.0,
            bid=round_price(price * (1 - self.spread)),
            ask=round_price(price * (1 + self.spread)),
            bid_size=int(bid_size),
            ask_size=int(ask_size),
            last_updated=int(last_updated),
        )


@dataclass(frozen=True)
class HistoryCandle:
    date: str
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class DepthLevel:
    price: float
    quantity: int
    orders: int


@dataclass(frozen=True)
class OrderBook:
    symbol: str
    last_price: float
    bids: list[DepthLevel]
    asks: list[DepthLevel]

    @property
    def total_bid_qty(self) -> int:
        return sum(level.quantity for level in self.bids)

    @property
    def total_ask_qty(self) -> int:
        return sum(level.quantity for level in self.asks)


@dataclass(frozen=True)
class PriceHistory:
    symbol: str
    range: str
    interval: Optional[str]
    candles: list[HistoryCandle]
