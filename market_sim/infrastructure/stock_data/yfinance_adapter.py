"""
Infrastructure adapter: yfinance → IQuoteProvider.
All yfinance-specific details (fast_info, history(), DataFrame rows) are
confined here; the rest of the codebase depends only on IQuoteProvider.
Every library failure surfaces as UpstreamError.
"""

import math
import random
import time
from typing import Any, Mapping, Optional

import yfinance as yf

from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.entities.quote import LIVE_SPREAD, HistoryCandle, Quote, round_price
from market_sim.domain.errors import UpstreamError
from market_sim.domain.ports.quote_provider_port import IQuoteProvider

# range -> (yfinance period, default interval)
RANGE_PARAMS: dict[str, tuple[str, str]] = {
    "1d": ("1d", "5m"),
    "5d": ("5d", "15m"),
    "1mo": ("1mo", "1h"),
    "3mo": ("3mo", "1d"),
    "6mo": ("6mo", "1d"),
    "1y": ("1y", "1d"),
    "2y": ("2y", "1wk"),
    "5y": ("5y", "1wk"),
    "max": ("max", "1mo"),
}

VALID_INTERVALS = frozenset(
    ["1m", "2m", "5m", "15m", "30m", "60m", "90m", "1h", "1d", "5d", "1wk", "1mo", "3mo"]
)


def _number(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


class YFinanceQuoteProvider(IQuoteProvider):
    """Fetches NSE/BSE quotes and candles from Yahoo Finance via the yfinance library."""

    def __init__(self, catalog: Mapping[str, CatalogEntry], rng: Optional[random.Random] = None) -> None:
        self._catalog = catalog
        self._rng = rng or random.Random()

    def fetch_quote(self, symbol: str) -> Quote:
        try:
            fast_info = yf.Ticker(symbol).fast_info
            current = _number(getattr(fast_info, "last_price", None))
            previous = _number(getattr(fast_info, "previous_close", None))
            day_open = _number(getattr(fast_info, "open", None))
            day_high = _number(getattr(fast_info, "day_high", None))
            day_low = _number(getattr(fast_info, "day_low", None))
            volume = _number(getattr(fast_info, "last_volume", None))
        except Exception as exc:
            raise UpstreamError(f"quote request failed for {symbol!r}: {exc}") from exc

        current = current or previous
        previous = previous or current
        if not current:
            raise UpstreamError(f"No price data available for symbol: {symbol!r}")

        entry = self._catalog.get(symbol)
        return Quote.create(
            symbol=symbol,
            name=entry.name if entry else symbol,
            sector=entry.sector if entry else "Other",
            price=current,
            previous_close=round_price(previous),
            open=day_open or previous,
            high=day_high or current,
            low=day_low or current,
            volume=int(volume or 0),
            bid_size=self._rng.randrange(100, 600),
            ask_size=self._rng.randrange(100, 600),
            last_updated=int(time.time() * 1000),
            spread=LIVE_SPREAD,
        )

    def fetch_history(
        self,
        symbol: str,
        range_key: str = "1y",
        interval: Optional[str] = None,
    ) -> list[HistoryCandle]:
        period, default_interval = RANGE_PARAMS.get(range_key, RANGE_PARAMS["1y"])
        interval = interval if interval in VALID_INTERVALS else default_interval

        try:
            history = yf.Ticker(symbol).history(period=period, interval=interval)
        except Exception as exc:
            raise UpstreamError(f"history request failed for {symbol!r}: {exc}") from exc

        if history is None or history.empty:
            raise UpstreamError(f"No historical data available for symbol: {symbol!r}")

        candles = []
        for ts, row in history.iterrows():
            close = _number(row.get("Close"))
            if not close or close <= 0:
                continue
            candles.append(
                HistoryCandle(
                    date=ts.strftime("%Y-%m-%d"),
                    timestamp=int(ts.timestamp() * 1000),
                    open=round_price(_number(row.get("Open")) or close),
                    high=round_price(_number(row.get("High")) or close),
                    low=round_price(_number(row.get("Low")) or close),
                    close=round_price(close),
                    volume=int(_number(row.get("Volume")) or 0),
                )
            )
        return candles
