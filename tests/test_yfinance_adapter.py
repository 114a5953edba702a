import random
from types import SimpleNamespace

import pandas as pd
import pytest

from market_sim.domain.errors import UpstreamError
from market_sim.infrastructure.stock_data import yfinance_adapter
from market_sim.infrastructure.stock_data.yfinance_adapter import YFinanceQuoteProvider


class FakeTicker:
    fast_info = SimpleNamespace(
        last_price=1412.5,
        previous_close=1400.0,
        open=1401.0,
        day_high=1420.0,
        day_low=1395.0,
        last_volume=250_000,
    )
    history_frame = None
    calls = []

    def __init__(self, symbol):
        self.symbol = symbol

    def history(self, **kwargs):
        FakeTicker.calls.append(kwargs)
        return FakeTicker.history_frame


@pytest.fixture
def ticker(monkeypatch):
    FakeTicker.calls = []
    FakeTicker.history_frame = pd.DataFrame(
        {
            "Open": [100.0, 101.0, 102.0],
            "High": [102.0, 103.0, 104.0],
            "Low": [99.0, 100.0, float("nan")],
            "Close": [101.0, float("nan"), 103.46],
            "Volume": [1000, 2000, 3000],
        },
        index=pd.to_datetime(["2024-01-08", "2024-01-09", "2024-01-10"]).tz_localize("Asia/Kolkata"),
    )
    monkeypatch.setattr(yfinance_adapter.yf, "Ticker", FakeTicker)
    return FakeTicker


@pytest.fixture
def provider(catalog):
    return YFinanceQuoteProvider(catalog, random.Random(1))


def test_quote_from_fast_info(ticker, provider):
    quote = provider.fetch_quote("FOO.NS")
    assert quote.name == "Foo Technologies"
    assert quote.sector == "IT"
    assert quote.price == 1412.5
    assert quote.previous_close == 1400.0
    assert quote.change == pytest.approx(12.5)
    assert quote.volume == 250_000
    assert quote.bid == round(1412.5 * (1 - 0.0002), 2)
    assert 100 <= quote.bid_size < 600


def test_unknown_symbol_falls_back_to_bare_metadata(ticker, provider):
    quote = provider.fetch_quote("XYZ.NS")
    assert quote.name == "XYZ.NS"
    assert quote.sector == "Other"


def test_missing_price_is_an_upstream_error(monkeypatch, provider):
    class EmptyTicker(FakeTicker):
        fast_info = SimpleNamespace(last_price=None, previous_close=None)

    monkeypatch.setattr(yfinance_adapter.yf, "Ticker", EmptyTicker)
    with pytest.raises(UpstreamError):
        provider.fetch_quote("FOO.NS")


def test_library_failure_is_wrapped(monkeypatch, provider):
    def boom(symbol):
        raise RuntimeError("network down")

    monkeypatch.setattr(yfinance_adapter.yf, "Ticker", boom)
    with pytest.raises(UpstreamError, match="network down"):
        provider.fetch_quote("FOO.NS")
    with pytest.raises(UpstreamError):
        provider.fetch_history("FOO.NS")


def test_history_drops_rows_without_close(ticker, provider):
    candles = provider.fetch_history("FOO.NS", "5d")

    assert [c.date for c in candles] == ["2024-01-08", "2024-01-10"]
    assert candles[-1].close == 103.46
    assert candles[-1].low == 103.46
    assert ticker.calls == [{"period": "5d", "interval": "15m"}]


def test_history_interval_override_must_be_valid(ticker, provider):
    provider.fetch_history("FOO.NS", "1mo", "1d")
    provider.fetch_history("FOO.NS", "1mo", "7h")
    provider.fetch_history("FOO.NS", "10y")
    assert ticker.calls == [
        {"period": "1mo", "interval": "1d"},
        {"period": "1mo", "interval": "1h"},
        {"period": "1y", "interval": "1d"},
    ]


def test_empty_history_is_an_upstream_error(ticker, provider):
    ticker.history_frame = pd.DataFrame()
    with pytest.raises(UpstreamError):
        provider.fetch_history("FOO.NS")
