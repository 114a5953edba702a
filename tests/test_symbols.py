import pytest

from market_sim.application.services.symbols import range_days, resolve_symbol, symbol_candidates


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("reliance", "RELIANCE.NS"),
        ("RELIANCE.NS", "RELIANCE.NS"),
        ("infy.bo", "INFY.BO"),
        ("^nsei", "^NSEI"),
        (" tcs ", "TCS.NS"),
    ],
)
def test_resolve_symbol(raw, expected):
    assert resolve_symbol(raw) == expected


def test_candidates_try_suffixed_symbol_first():
    assert symbol_candidates("foo") == ["FOO.NS", "FOO"]
    assert symbol_candidates("FOO.NS") == ["FOO.NS"]
    assert symbol_candidates("^FOOX") == ["^FOOX"]


def test_range_days_falls_back_to_one_year():
    assert range_days("5d") == 5
    assert range_days("6mo") == 180
    assert range_days("10y") == 365

