"""
Use-case: build an indicative five-level order book around a symbol's last price.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import random

from market_sim.application.services.order_book import SIMULATED_DEPTH, DepthProfile, build_order_book
from market_sim.domain.entities.quote import OrderBook
from market_sim.domain.errors import InvalidRequestError, StockNotFoundError
from market_sim.domain.ports.market_data_port import IMarketDataSource


class GetMarketDepthUseCase:
    def __init__(
        self,
        source: IMarketDataSource,
        rng: random.Random,
        profile: DepthProfile = SIMULATED_DEPTH,
    ) -> None:
        self._source = source
        self._rng = rng
        self._profile = profile

    def execute(self, symbol: str) -> OrderBook:
        if not symbol or not symbol.strip():
            raise InvalidRequestError("symbol must be a non-empty string")
        quote = self._source.get_quote(symbol)
        if quote is None:
            raise StockNotFoundError()
        return build_order_book(quote.symbol, quote.price, self._rng, self._profile)
