"""
Use-cases: retrieve the current quote for one symbol, or for a batch of symbols.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from typing import Any

from market_sim.domain.entities.quote import Quote
from market_sim.domain.errors import InvalidRequestError, StockNotFoundError
from market_sim.domain.ports.market_data_port import IMarketDataSource


class GetStockQuoteUseCase:
    def __init__(self, source: IMarketDataSource) -> None:
        self._source = source

    def execute(self, symbol: str) -> Quote:
        """Fetch the current quote for *symbol*.

        Bare symbols get the default exchange suffix (``reliance`` ->
        ``RELIANCE.NS``); matching is case-insensitive.

        Raises:
            InvalidRequestError: if *symbol* is blank.
            StockNotFoundError:  if the symbol is unknown (or the provider has nothing).
        """
        if not symbol or not symbol.strip():
            raise InvalidRequestError("symbol must be a non-empty string")
        quote = self._source.get_quote(symbol)
        if quote is None:
            raise StockNotFoundError()
        return quote


class GetBatchQuotesUseCase:
    def __init__(self, source: IMarketDataSource) -> None:
        self._source = source

    def execute(self, symbols: Any) -> list[Quote]:
        """Fetch quotes for every resolvable symbol in *symbols*; the rest are dropped.

        Raises:
            InvalidRequestError: if *symbols* is missing or not a list of strings.
        """
        if not isinstance(symbols, list) or not all(isinstance(s, str) for s in symbols):
            raise InvalidRequestError("symbols array required")
        return self._source.get_quotes([s for s in symbols if s.strip()])
