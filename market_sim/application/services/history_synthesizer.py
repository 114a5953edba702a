"""
Synthetic daily candle history.

The walk starts somewhere between 70% and 110% of the base price and drifts
back toward it with a gentle mean-reverting trend, so the last candle lands
near the price the live simulation starts from.
"""

import random
from datetime import datetime, timedelta

from market_sim.application.services.volatility import volatility_of
from market_sim.domain.entities.quote import HistoryCandle, round_price

DEFAULT_HISTORY_DAYS = 365
MEAN_REVERSION = 0.001
MIN_DAILY_VOLUME = 500_000
MAX_DAILY_VOLUME = 10_500_000


def synthesize(
    base_price: float,
    sector: str,
    rng: random.Random,
    now: datetime,
    days: int = DEFAULT_HISTORY_DAYS,
) -> list[HistoryCandle]:
    """Generate one candle per weekday from *days* ago up to *now*, oldest first.

    Args:
        base_price: Anchor price the walk reverts toward.
        sector:     Sector name, used to look up the daily volatility.
        rng:        Random source; seed it for a reproducible series.
        now:        The "today" of the series (timezone-aware, UTC).
        days:       Calendar days to span; weekends are skipped.
    """
    volatility = volatility_of(sector)
    current = base_price * rng.uniform(0.7, 1.1)
    candles: list[HistoryCandle] = []

    for offset in range(days, -1, -1):
        day = now - timedelta(days=offset)
        if day.weekday() >= 5:
            continue

        trend = (base_price - current) * MEAN_REVERSION
        delta = rng.uniform(-1, 1) * (2 * volatility) * current + trend

        open_ = current
        close = max(current + delta, current * 0.5)
        high = max(open_, close) * (1 + rng.random() * volatility)
        low = min(open_, close) * (1 - rng.random() * volatility)

        candles.append(
            HistoryCandle(
                date=day.strftime("%Y-%m-%d"),
                timestamp=int(day.timestamp() * 1000),
                open=round_price(open_),
                high=round_price(high),
                low=round_price(low),
                close=round_price(close),
                volume=rng.randrange(MIN_DAILY_VOLUME, MAX_DAILY_VOLUME),
            )
        )
        current = close

    return candles
