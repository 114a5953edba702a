"""
IMarketDataSource backed by the in-memory PriceStore.

History reads return a windowed copy of the stored series with today's candle
reflecting the live quote; the stored series itself is never touched.
"""

from datetime import datetime
from typing import Callable, Optional

from market_sim.application.services.market_clock import market_status
from market_sim.application.services.price_store import PriceStore
from market_sim.application.services.simulation_engine import SimulationEngine
from market_sim.application.services.symbols import DAY_MS, range_days, symbol_candidates
from market_sim.domain.entities.market_status import MarketStatus
from market_sim.domain.entities.quote import HistoryCandle, Quote
from market_sim.domain.ports.market_data_port import IMarketDataSource


class SimulatedMarketDataSource(IMarketDataSource):
    def __init__(
        self,
        store: PriceStore,
        engine: SimulationEngine,
        clock: Callable[[], datetime],
    ) -> None:
        self._store = store
        self._engine = engine
        self._clock = clock

    def list_stocks(self, limit: Optional[int] = None) -> list[Quote]:
        stocks = [q for q in self._store.get_all() if not q.is_index]
        return stocks if limit is None else stocks[:limit]

    def list_indices(self) -> list[Quote]:
        return [q for q in self._store.get_all() if q.is_index]

    def get_quote(self, symbol: str) -> Optional[Quote]:
        for candidate in symbol_candidates(symbol):
            quote = self._store.get(candidate)
            if quote is not None:
                return quote
        return None

    def get_quotes(self, symbols: list[str]) -> list[Quote]:
        quotes = (self.get_quote(symbol) for symbol in symbols)
        return [q for q in quotes if q is not None]

    def get_history(
        self,
        symbol: str,
        range_key: str = "1y",
        interval: Optional[str] = None,
    ) -> Optional[list[HistoryCandle]]:
        for candidate in symbol_candidates(symbol):
            stored = self._store.history(candidate)
            if stored is not None:
                break
        else:
            return None

        now = self._clock()
        cutoff = int(now.timestamp() * 1000) - range_days(range_key) * DAY_MS
        window = [c for c in stored if c.timestamp >= cutoff]

        quote = self._store.get(candidate)
        if quote is not None and window:
            window = overlay_live_quote(window, quote, now)
        return window

    def search(self, query: str, limit: int) -> list[Quote]:
        needle = query.lower()
        matches = [
            q for q in self._store.get_all()
            if needle in q.symbol.lower()
            or needle in q.name.lower()
            or needle in (q.sector or "").lower()
        ]
        return matches[:limit]

    def market_status(self) -> MarketStatus:
        settings = self._engine.settings
        return market_status(settings.always_open, self._clock(), settings.speed)

    def symbol_count(self) -> int:
        return len(self._store)


def overlay_live_quote(candles: list[HistoryCandle], quote: Quote, now: datetime) -> list[HistoryCandle]:
    """Return a copy of *candles* whose last entry is today's candle built from *quote*.

    An existing candle for today has its close/high/low/volume refreshed;
    otherwise a new candle opening at the previous close is appended.
    """
    today = now.strftime("%Y-%m-%d")
    served = list(candles)
    last = served[-1]

    if last.date == today:
        served[-1] = HistoryCandle(
            date=last.date,
            timestamp=last.timestamp,
            open=last.open,
            high=max(last.high, quote.price),
            low=min(last.low, quote.price),
            close=quote.price,
            volume=quote.volume or last.volume,
        )
    else:
        open_ = quote.previous_close or quote.price
        served.append(
            HistoryCandle(
                date=today,
                timestamp=int(now.timestamp() * 1000),
                open=open_,
                high=max(quote.high, open_, quote.price),
                low=min(quote.low, open_, quote.price),
                close=quote.price,
                volume=quote.volume,
            )
        )
    return served
