"""
Price state store: the in-memory map of symbol -> current Quote plus the
synthetic candle history per symbol.

Writers replace whole records; readers copy under the lock and never hold it
across a simulation tick. Quote and HistoryCandle are frozen, so handing the
records themselves to readers is safe.
"""

import logging
import random
import threading
from datetime import datetime
from typing import Callable, Mapping, Optional

from market_sim.application.services.history_synthesizer import DEFAULT_HISTORY_DAYS, synthesize
from market_sim.application.services.volatility import volatility_of
from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.entities.quote import HistoryCandle, Quote

logger = logging.getLogger(__name__)

MIN_INITIAL_VOLUME = 1_000_000
MAX_INITIAL_VOLUME = 11_000_000
MIN_DISPLAY_SIZE = 100
MAX_DISPLAY_SIZE = 1100


class PriceStore:
    def __init__(
        self,
        catalog: Mapping[str, CatalogEntry],
        rng: random.Random,
        clock: Callable[[], datetime],
        history_days: int = DEFAULT_HISTORY_DAYS,
    ) -> None:
        """
        Args:
            catalog:      Read-only symbol -> CatalogEntry table.
            rng:          Shared random source (seed it for reproducible runs).
            clock:        Returns the current timezone-aware UTC datetime.
            history_days: Calendar days of synthetic history per symbol.
        """
        self._catalog = dict(catalog)
        self._rng = rng
        self._clock = clock
        self._history_days = history_days
        self._lock = threading.Lock()
        self._quotes: dict[str, Quote] = {}
        self._history: dict[str, tuple[HistoryCandle, ...]] = {}

    @property
    def catalog(self) -> Mapping[str, CatalogEntry]:
        return self._catalog

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Seed every catalog symbol with a fresh quote and a fresh history.

        Both maps are built off to the side and swapped in together.
        """
        now = self._clock()
        now_ms = int(now.timestamp() * 1000)
        quotes: dict[str, Quote] = {}
        history: dict[str, tuple[HistoryCandle, ...]] = {}

        for symbol, entry in self._catalog.items():
            quotes[symbol] = self._seed_quote(entry, now_ms)
            history[symbol] = tuple(
                synthesize(entry.base_price, entry.sector, self._rng, now, self._history_days)
            )

        with self._lock:
            self._quotes = quotes
            self._history = history
        logger.info("Seeded %d symbols with simulated prices", len(quotes))

    def reset(self) -> None:
        """Restore every symbol to its base anchor, as if the process had restarted."""
        self.init()

    def _seed_quote(self, entry: CatalogEntry, now_ms: int) -> Quote:
        rng = self._rng
        base = entry.base_price
        variation = rng.uniform(-1, 1) * volatility_of(entry.sector) * base
        price = base + variation
        return Quote.create(
            symbol=entry.symbol,
            name=entry.name,
            sector=entry.sector,
            price=price,
            previous_close=base,
            open=base + rng.uniform(-0.5, 0.5) * 0.01 * base,
            high=price * (1 + rng.random() * 0.02),
            low=price * (1 - rng.random() * 0.02),
            volume=rng.randrange(MIN_INITIAL_VOLUME, MAX_INITIAL_VOLUME),
            bid_size=rng.randrange(MIN_DISPLAY_SIZE, MAX_DISPLAY_SIZE),
            ask_size=rng.randrange(MIN_DISPLAY_SIZE, MAX_DISPLAY_SIZE),
            last_updated=now_ms,
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, symbol: str) -> Optional[Quote]:
        with self._lock:
            return self._quotes.get(symbol)

    def get_all(self) -> list[Quote]:
        with self._lock:
            return list(self._quotes.values())

    def history(self, symbol: str) -> Optional[tuple[HistoryCandle, ...]]:
        with self._lock:
            return self._history.get(symbol)

    def __len__(self) -> int:
        with self._lock:
            return len(self._quotes)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set(self, symbol: str, quote: Quote) -> None:
        """Replace the record for *symbol* in one step."""
        if quote.symbol != symbol:
            raise ValueError(f"quote for {quote.symbol!r} stored under {symbol!r}")
        with self._lock:
            self._quotes[symbol] = quote
