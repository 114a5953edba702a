"""
Market clock: classifies a wall-clock instant into an NSE trading session.
Pure function of (always_open, now); no state, no I/O.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from market_sim.domain.entities.market_status import MarketStatus

IST = timezone(timedelta(hours=5, minutes=30), name="IST")

PRE_MARKET_OPEN = 9 * 60
MARKET_OPEN = 9 * 60 + 15
MARKET_CLOSE = 15 * 60 + 30
POST_MARKET_CLOSE = 16 * 60

SATURDAY = 5


def market_status(always_open: bool, now: datetime, speed: Optional[float] = None) -> MarketStatus:
    """Return the session *now* falls into.

    Args:
        always_open: Simulation override; the market is open around the clock.
        now:         Timezone-aware instant (naive values are taken as UTC).
        speed:       Simulation speed, echoed back in the simulated status.
    """
    if always_open:
        return MarketStatus(
            is_open=True,
            reason="Simulation Mode - Always Open",
            session="Practice Trading",
            is_simulated=True,
            speed=speed,
        )

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(IST)

    if local.weekday() >= SATURDAY:
        return MarketStatus(False, "Weekend - Market Closed", next_open="Monday 9:15 AM IST")

    minutes = local.hour * 60 + local.minute
    if minutes < PRE_MARKET_OPEN:
        return MarketStatus(False, "Pre-Market - Opening at 9:15 AM IST", next_open="Today 9:15 AM IST")
    if minutes < MARKET_OPEN:
        return MarketStatus(False, "Pre-Market Session", next_open="Today 9:15 AM IST", pre_market=True)
    if minutes < MARKET_CLOSE:
        return MarketStatus(True, "Market Open", session="Regular Trading")
    if minutes < POST_MARKET_CLOSE:
        return MarketStatus(False, "Post-Market Session", next_open="Tomorrow 9:15 AM IST", post_market=True)
    return MarketStatus(False, "Market Closed", next_open="Tomorrow 9:15 AM IST")
