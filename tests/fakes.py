import random
from datetime import datetime, timezone

from market_sim.domain.entities.quote import LIVE_SPREAD, HistoryCandle, Quote
from market_sim.domain.errors import UpstreamError
from market_sim.domain.ports.quote_provider_port import IQuoteProvider

# Wednesday 11:30 IST, inside regular trading hours
FIXED_NOW = datetime(2024, 1, 10, 6, 0, tzinfo=timezone.utc)
# Sunday
SUNDAY = datetime(2024, 1, 14, 6, 0, tzinfo=timezone.utc)


class MoveUpRandom(random.Random):
    """Every draw lands on the value that makes a price tick upward by one tick."""

    def random(self):
        return 0.0

    def uniform(self, a, b):
        return b

    def randint(self, a, b):
        return a

    def randrange(self, start, stop=None, step=1):
        return start


class MoveDownRandom(MoveUpRandom):
    def uniform(self, a, b):
        return a


class FrozenRandom(MoveUpRandom):
    """random() never falls under the movement threshold: nothing trades."""

    def random(self):
        return 0.999


def make_quote(symbol, price=100.0):
    return Quote.create(
        symbol=symbol,
        name=symbol,
        sector="IT",
        price=price,
        previous_close=100.0,
        open=100.0,
        high=price,
        low=price,
        volume=1000,
        bid_size=100,
        ask_size=100,
        last_updated=0,
        spread=LIVE_SPREAD,
    )


CANDLE = HistoryCandle("2024-01-10", 1704866400000, 100.0, 101.0, 99.0, 100.5, 1000)


class FakeProvider(IQuoteProvider):
    """Quote provider that answers from memory; symbols starting with BAD fail."""

    def __init__(self):
        self.quote_calls = []
        self.history_calls = []
        self.failing = False

    def fetch_quote(self, symbol):
        self.quote_calls.append(symbol)
        if self.failing or symbol.startswith("BAD"):
            raise UpstreamError(f"no data for {symbol}")
        return make_quote(symbol)

    def fetch_history(self, symbol, range_key="1y", interval=None):
        self.history_calls.append((symbol, range_key, interval))
        if self.failing:
            raise UpstreamError("upstream down")
        return [CANDLE]
