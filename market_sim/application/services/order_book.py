"""Synthetic five-level order book around a last traded price."""

import random
from dataclasses import dataclass

from market_sim.domain.entities.quote import DepthLevel, OrderBook, round_price

DEPTH_LEVELS = 5


@dataclass(frozen=True)
class DepthProfile:
    """Shape of the synthetic book: price step per level and quantity bounds."""

    step: float = 0.0005
    min_quantity: int = 100
    max_quantity: int = 5100
    min_orders: int = 1
    max_orders: int = 21


SIMULATED_DEPTH = DepthProfile()
LIVE_DEPTH = DepthProfile(step=0.001, max_quantity=1100)


def build_order_book(
    symbol: str,
    price: float,
    rng: random.Random,
    profile: DepthProfile = SIMULATED_DEPTH,
) -> OrderBook:
    bids: list[DepthLevel] = []
    asks: list[DepthLevel] = []
    for level in range(1, DEPTH_LEVELS + 1):
        offset = profile.step * level
        bids.append(_level(price * (1 - offset), rng, profile))
        asks.append(_level(price * (1 + offset), rng, profile))
    return OrderBook(symbol=symbol, last_price=price, bids=bids, asks=asks)


def _level(price: float, rng: random.Random, profile: DepthProfile) -> DepthLevel:
    return DepthLevel(
        price=round_price(price),
        quantity=rng.randrange(profile.min_quantity, profile.max_quantity),
        orders=rng.randrange(profile.min_orders, profile.max_orders),
    )
