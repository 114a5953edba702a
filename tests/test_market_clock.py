from datetime import datetime, timezone

import pytest

from market_sim.application.services.market_clock import market_status


def utc(hour, minute=0, day=10):
    return datetime(2024, 1, day, hour, minute, tzinfo=timezone.utc)


def test_always_open_reports_simulated_session_and_speed():
    status = market_status(True, utc(20), speed=2)
    assert status.is_open
    assert status.reason == "Simulation Mode - Always Open"
    assert status.session == "Practice Trading"
    assert status.is_simulated
    assert status.speed == 2


@pytest.mark.parametrize(
    "now, is_open, reason",
    [
        (utc(3, 0), False, "Pre-Market - Opening at 9:15 AM IST"),  # 08:30 IST
        (utc(3, 35), False, "Pre-Market Session"),  # 09:05 IST
        (utc(3, 45), True, "Market Open"),  # 09:15 IST
        (utc(6, 0), True, "Market Open"),  # 11:30 IST
        (utc(10, 0), False, "Post-Market Session"),  # 15:30 IST
        (utc(10, 29), False, "Post-Market Session"),  # 15:59 IST
        (utc(10, 30), False, "Market Closed"),  # 16:00 IST
    ],
)
def test_weekday_sessions(now, is_open, reason):
    status = market_status(False, now)
    assert status.is_open is is_open
    assert status.reason == reason
    assert not status.is_simulated


def test_session_flags():
    assert market_status(False, utc(3, 35)).pre_market
    assert market_status(False, utc(10, 0)).post_market
    assert market_status(False, utc(6)).session == "Regular Trading"


def test_weekend_is_closed_until_monday():
    status = market_status(False, utc(6, day=13))
    assert not status.is_open
    assert status.reason == "Weekend - Market Closed"
    assert status.next_open == "Monday 9:15 AM IST"


def test_weekday_is_judged_in_ist_not_utc():
    # Sunday 20:00 UTC is already Monday 01:30 in India
    status = market_status(False, utc(20, day=14))
    assert status.reason == "Pre-Market - Opening at 9:15 AM IST"


def test_naive_datetimes_are_treated_as_utc():
    assert market_status(False, datetime(2024, 1, 10, 6, 0)).is_open
