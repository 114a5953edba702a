import random
from datetime import datetime

from fakes import FIXED_NOW
from market_sim.application.services.history_synthesizer import synthesize
from market_sim.application.services.volatility import DEFAULT_VOLATILITY, volatility_of


def test_one_candle_per_weekday_oldest_first():
    candles = synthesize(100.0, "IT", random.Random(1), FIXED_NOW, days=13)

    # 2023-12-28 (Thu) .. 2024-01-10 (Wed): ten weekdays
    assert len(candles) == 10
    assert candles[-1].date == "2024-01-10"
    assert all(datetime.strptime(c.date, "%Y-%m-%d").weekday() < 5 for c in candles)
    assert [c.timestamp for c in candles] == sorted(c.timestamp for c in candles)


def test_candles_are_well_formed():
    for candle in synthesize(250.0, "Steel", random.Random(7), FIXED_NOW):
        assert candle.low <= candle.open <= candle.high
        assert candle.low <= candle.close <= candle.high
        assert candle.close > 0
        assert 500_000 <= candle.volume < 10_500_000


def test_walk_starts_within_band_of_base():
    first = synthesize(1000.0, "FMCG", random.Random(3), FIXED_NOW)[0]
    assert 700.0 <= first.open <= 1100.0


def test_same_seed_same_series():
    a = synthesize(100.0, "IT", random.Random(9), FIXED_NOW, days=60)
    b = synthesize(100.0, "IT", random.Random(9), FIXED_NOW, days=60)
    assert a == b


def test_volatility_table_and_default():
    assert volatility_of("IT") == 0.025
    assert volatility_of("Fintech") == 0.045
    assert volatility_of("Jewellery") == DEFAULT_VOLATILITY
    assert volatility_of(None) == DEFAULT_VOLATILITY
