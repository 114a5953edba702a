"""
Use-case: top gainers, top losers and most active stocks.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from enum import Enum
from typing import Optional

from market_sim.domain.entities.quote import Quote
from market_sim.domain.ports.market_data_port import IMarketDataSource


class MoverKind(str, Enum):
    GAINERS = "gainers"
    LOSERS = "losers"
    ACTIVE = "active"


class GetMarketMoversUseCase:
    def __init__(
        self,
        source: IMarketDataSource,
        universe: Optional[int] = None,
        top: int = 10,
    ) -> None:
        """
        Args:
            source:   Market data source.
            universe: Only rank the first *universe* stocks (None ranks all).
            top:      Number of stocks returned.
        """
        self._source = source
        self._universe = universe
        self._top = top

    def execute(self, kind: MoverKind) -> list[Quote]:
        stocks = self._source.list_stocks(self._universe)
        if kind is MoverKind.GAINERS:
            ranked = sorted(stocks, key=lambda q: q.change_percent, reverse=True)
        elif kind is MoverKind.LOSERS:
            ranked = sorted(stocks, key=lambda q: q.change_percent)
        else:
            ranked = sorted(stocks, key=lambda q: q.volume, reverse=True)
        return ranked[:self._top]
