"""
Use-case: case-insensitive substring search over symbol, name and sector.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from typing import Optional, Union

from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.entities.quote import Quote
from market_sim.domain.ports.market_data_port import IMarketDataSource


class SearchSymbolsUseCase:
    def __init__(self, source: IMarketDataSource, limit: int = 10) -> None:
        self._source = source
        self._limit = limit

    def execute(self, query: Optional[str]) -> list[Union[Quote, CatalogEntry]]:
        """Return at most ``limit`` matches; an empty query matches nothing."""
        if not query:
            return []
        return self._source.search(query, self._limit)
