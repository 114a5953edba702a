"""
IMarketDataSource that proxies a third-party IQuoteProvider.

Quotes and candle series are cached briefly. When the provider fails, the
last cached value is served however stale it is, and callers get None (or an
empty series) only when nothing was ever cached. Provider errors never reach
the caller.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Mapping, Optional

from cachetools import TTLCache

from market_sim.application.services.market_clock import market_status
from market_sim.application.services.symbols import resolve_symbol
from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.entities.market_status import MarketStatus
from market_sim.domain.entities.quote import HistoryCandle, Quote
from market_sim.domain.ports.market_data_port import IMarketDataSource
from market_sim.domain.ports.quote_provider_port import IQuoteProvider

logger = logging.getLogger(__name__)

QUOTE_TTL_SECONDS = 5.0
HISTORY_TTL_SECONDS = 300.0
QUOTE_CACHE_SIZE = 400
HISTORY_CACHE_SIZE = 200
BATCH_SIZE = 5
BATCH_PAUSE_SECONDS = 0.2
MIN_SEARCH_LENGTH = 2


class LiveMarketDataSource(IMarketDataSource):
    def __init__(
        self,
        provider: IQuoteProvider,
        catalog: Mapping[str, CatalogEntry],
        clock: Callable[[], datetime],
        quote_ttl: float = QUOTE_TTL_SECONDS,
        history_ttl: float = HISTORY_TTL_SECONDS,
        batch_pause: float = BATCH_PAUSE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Args:
            provider:    Upstream quote provider (e.g. YFinanceQuoteProvider).
            catalog:     Symbol metadata; decides which symbols are listed.
            clock:       Returns the current timezone-aware UTC datetime.
            quote_ttl:   Seconds a cached quote is served without refetching.
            history_ttl: Seconds a cached candle series is served without refetching.
            batch_pause: Pause between groups of upstream requests.
            sleep:       Injected for tests.
            timer:       Monotonic clock driving cache expiry; injected for tests.
        """
        self._provider = provider
        self._catalog = dict(catalog)
        self._clock = clock
        # cachetools caches are not thread-safe; one lock guards all four maps
        self._cache_lock = threading.Lock()
        self._quotes: TTLCache = TTLCache(maxsize=QUOTE_CACHE_SIZE, ttl=quote_ttl, timer=timer)
        self._history: TTLCache = TTLCache(maxsize=HISTORY_CACHE_SIZE, ttl=history_ttl, timer=timer)
        # last good value per key, served when the provider fails
        self._last_quotes: dict[str, Quote] = {}
        self._last_history: dict[str, list[HistoryCandle]] = {}
        self._batch_pause = batch_pause
        self._sleep = sleep

    def list_stocks(self, limit: Optional[int] = None) -> list[Quote]:
        symbols = [s for s, entry in self._catalog.items() if not entry.is_index]
        return self._fetch_many(symbols if limit is None else symbols[:limit])

    def list_indices(self) -> list[Quote]:
        return self._fetch_many([s for s, entry in self._catalog.items() if entry.is_index])

    def get_quote(self, symbol: str) -> Optional[Quote]:
        return self._fetch_quote(resolve_symbol(symbol))

    def get_quotes(self, symbols: list[str]) -> list[Quote]:
        return self._fetch_many([resolve_symbol(s) for s in symbols])

    def get_history(
        self,
        symbol: str,
        range_key: str = "1y",
        interval: Optional[str] = None,
    ) -> Optional[list[HistoryCandle]]:
        symbol = resolve_symbol(symbol)
        key = f"{symbol}_{range_key}_{interval or 'auto'}"
        with self._cache_lock:
            cached = self._history.get(key)
        if cached is not None:
            return cached
        try:
            candles = self._provider.fetch_history(symbol, range_key, interval)
        except Exception as exc:
            logger.warning("Error fetching history for %s: %s", symbol, exc)
            with self._cache_lock:
                return self._last_history.get(key) or []
        with self._cache_lock:
            self._history[key] = candles
            self._last_history[key] = candles
        return candles

    def search(self, query: str, limit: int) -> list[CatalogEntry]:
        needle = query.strip().upper()
        if len(needle) < MIN_SEARCH_LENGTH:
            return []
        matches = [
            entry for symbol, entry in self._catalog.items()
            if needle in symbol
            or needle in entry.name.upper()
            or needle in entry.sector.upper()
        ]
        return matches[:limit]

    def market_status(self) -> MarketStatus:
        return market_status(False, self._clock())

    def symbol_count(self) -> int:
        return sum(1 for entry in self._catalog.values() if not entry.is_index)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _fetch_quote(self, symbol: str) -> Optional[Quote]:
        with self._cache_lock:
            cached = self._quotes.get(symbol)
        if cached is not None:
            return cached
        try:
            quote = self._provider.fetch_quote(symbol)
        except Exception as exc:
            logger.warning("Error fetching %s: %s", symbol, exc)
            with self._cache_lock:
                return self._last_quotes.get(symbol)
        with self._cache_lock:
            self._quotes[symbol] = quote
            self._last_quotes[symbol] = quote
        return quote

    def _fetch_many(self, symbols: list[str]) -> list[Quote]:
        """Fetch in groups of BATCH_SIZE, pausing between groups to stay under rate limits."""
        results: list[Quote] = []
        with ThreadPoolExecutor(max_workers=BATCH_SIZE) as pool:
            for start in range(0, len(symbols), BATCH_SIZE):
                batch = symbols[start:start + BATCH_SIZE]
                results.extend(q for q in pool.map(self._fetch_quote, batch) if q is not None)
                if start + BATCH_SIZE < len(symbols):
                    self._sleep(self._batch_pause)
        return results
