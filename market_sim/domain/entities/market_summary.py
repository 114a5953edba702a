"""
Domain entities for market-wide aggregates (sectors, breadth, overview).
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional

from market_sim.domain.entities.market_status import MarketStatus
from market_sim.domain.entities.quote import Quote


@dataclass(frozen=True)
class SectorPerformance:
    name: str
    avg_change: float
    stock_count: int
    top_stock: Optional[str]


@dataclass(frozen=True)
class MarketBreadth:
    advancing: int
    declining: int
    unchanged: int
    total: int


@dataclass(frozen=True)
class MarketOverview:
    indices: list[Quote]
    breadth: MarketBreadth
    total_volume: int
    top_gainer: Optional[Quote]
    top_loser: Optional[Quote]
    last_updated: str
    market_status: MarketStatus
