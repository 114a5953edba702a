"""
Use-case: average change per sector, with each sector's best performer.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from collections import defaultdict
from typing import Optional

from market_sim.domain.entities.market_summary import SectorPerformance
from market_sim.domain.entities.quote import Quote
from market_sim.domain.ports.market_data_port import IMarketDataSource


class GetSectorPerformanceUseCase:
    def __init__(self, source: IMarketDataSource, universe: Optional[int] = None) -> None:
        self._source = source
        self._universe = universe

    def execute(self) -> list[SectorPerformance]:
        """Sectors sorted by average change percent, best first."""
        by_sector: dict[str, list[Quote]] = defaultdict(list)
        for quote in self._source.list_stocks(self._universe):
            if quote.sector:
                by_sector[quote.sector].append(quote)

        sectors = [
            SectorPerformance(
                name=name,
                avg_change=round(sum(q.change_percent for q in quotes) / len(quotes), 2),
                stock_count=len(quotes),
                top_stock=max(quotes, key=lambda q: q.change_percent).symbol,
            )
            for name, quotes in by_sector.items()
        ]
        return sorted(sectors, key=lambda s: s.avg_change, reverse=True)
