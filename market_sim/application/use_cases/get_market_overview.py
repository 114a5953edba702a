"""
Use-case: one-shot market snapshot (indices, breadth, volume, top movers and status).
Depends only on Domain ports and entities; no infrastructure imports.
"""

from datetime import datetime
from typing import Callable, Optional

from market_sim.domain.entities.market_summary import MarketBreadth, MarketOverview
from market_sim.domain.ports.market_data_port import IMarketDataSource


class GetMarketOverviewUseCase:
    def __init__(
        self,
        source: IMarketDataSource,
        clock: Callable[[], datetime],
        universe: Optional[int] = None,
    ) -> None:
        self._source = source
        self._clock = clock
        self._universe = universe

    def execute(self) -> MarketOverview:
        indices = self._source.list_indices()
        stocks = self._source.list_stocks(self._universe)

        breadth = MarketBreadth(
            advancing=sum(1 for q in stocks if q.change_percent > 0),
            declining=sum(1 for q in stocks if q.change_percent < 0),
            unchanged=sum(1 for q in stocks if q.change_percent == 0),
            total=len(stocks),
        )
        ranked = sorted(stocks, key=lambda q: q.change_percent, reverse=True)

        return MarketOverview(
            indices=indices,
            breadth=breadth,
            total_volume=sum(q.volume for q in stocks),
            top_gainer=ranked[0] if ranked else None,
            top_loser=ranked[-1] if ranked else None,
            last_updated=self._clock().isoformat(),
            market_status=self._source.market_status(),
        )
