"""
Port (interface) for the market data read side.
Both the simulated exchange and the live provider proxy implement this
interface, so every use case and HTTP route is shared between the two.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.entities.market_status import MarketStatus
from market_sim.domain.entities.quote import HistoryCandle, Quote


class IMarketDataSource(ABC):
    @abstractmethod
    def list_stocks(self, limit: Optional[int] = None) -> list[Quote]:
        """Current quotes for non-index symbols, in catalog order."""
        ...

    @abstractmethod
    def list_indices(self) -> list[Quote]: ...

    @abstractmethod
    def get_quote(self, symbol: str) -> Optional[Quote]:
        """Quote for a raw, user-supplied symbol; None when it cannot be resolved."""
        ...

    @abstractmethod
    def get_quotes(self, symbols: list[str]) -> list[Quote]:
        """Quotes for raw symbols; unresolved symbols are dropped."""
        ...

    @abstractmethod
    def get_history(
        self,
        symbol: str,
        range_key: str = "1y",
        interval: Optional[str] = None,
    ) -> Optional[list[HistoryCandle]]:
        """Candles for *range_key*; None when the symbol has no history at all."""
        ...

    @abstractmethod
    def search(self, query: str, limit: int) -> list[Union[Quote, CatalogEntry]]: ...

    @abstractmethod
    def market_status(self) -> MarketStatus: ...

    @abstractmethod
    def symbol_count(self) -> int: ...
