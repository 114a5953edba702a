"""
Use-case: retrieve daily (or intraday, for the live source) candles for a symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from typing import Optional

from market_sim.application.services.symbols import DEFAULT_RANGE, resolve_symbol
from market_sim.domain.entities.quote import PriceHistory
from market_sim.domain.errors import InvalidRequestError, StockNotFoundError
from market_sim.domain.ports.market_data_port import IMarketDataSource


class GetPriceHistoryUseCase:
    def __init__(self, source: IMarketDataSource) -> None:
        self._source = source

    def execute(
        self,
        symbol: str,
        range_key: str = DEFAULT_RANGE,
        interval: Optional[str] = None,
    ) -> PriceHistory:
        """Fetch the candle series for *symbol* over *range_key*.

        Args:
            symbol:    Ticker symbol (case-insensitive, suffix optional).
            range_key: One of 1d, 5d, 1mo, 3mo, 6mo, 1y (the live source also
                       accepts 2y, 5y, max). Unknown ranges fall back to 1y.
            interval:  Candle interval override; only the live source honours it.

        Raises:
            InvalidRequestError: if *symbol* is blank.
            StockNotFoundError:  if the source holds no history for the symbol.
        """
        if not symbol or not symbol.strip():
            raise InvalidRequestError("symbol must be a non-empty string")
        candles = self._source.get_history(symbol, range_key, interval)
        if candles is None:
            raise StockNotFoundError("Stock history not found")
        return PriceHistory(
            symbol=resolve_symbol(symbol),
            range=range_key,
            interval=interval,
            candles=candles,
        )
