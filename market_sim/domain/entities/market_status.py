"""
Domain entity describing whether the exchange is trading.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MarketStatus:
    is_open: bool
    reason: str
    session: Optional[str] = None
    next_open: Optional[str] = None
    is_simulated: bool = False
    pre_market: bool = False
    post_market: bool = False
    speed: Optional[float] = None
