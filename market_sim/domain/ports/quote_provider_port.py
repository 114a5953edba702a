"""
Port (interface) for third-party quote providers.
Infrastructure adapters (e.g. YFinanceQuoteProvider) must implement this interface.
Implementations raise UpstreamError on any provider failure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from market_sim.domain.entities.quote import HistoryCandle, Quote


class IQuoteProvider(ABC):
    @abstractmethod
    def fetch_quote(self, symbol: str) -> Quote: ...

    @abstractmethod
    def fetch_history(
        self,
        symbol: str,
        range_key: str = "1y",
        interval: Optional[str] = None,
    ) -> list[HistoryCandle]: ...
