import pytest
from fastapi.testclient import TestClient

from fakes import FIXED_NOW, FakeProvider
from market_sim.infrastructure.config.app_config import AppConfig
from market_sim.infrastructure.entrypoints.app_factory import create_app
from market_sim.infrastructure.entrypoints.context import build_live_context, build_simulated_context


@pytest.fixture
def sim_context(catalog):
    return build_simulated_context(AppConfig(seed=7, history_days=30), clock=lambda: FIXED_NOW, catalog=catalog)


@pytest.fixture
def client(sim_context):
    # no context manager: the lifespan (and so the price timer) never starts
    return TestClient(create_app(sim_context))


@pytest.fixture
def live_client(catalog):
    context = build_live_context(
        AppConfig(port=3003),
        provider=FakeProvider(),
        clock=lambda: FIXED_NOW,
        catalog=catalog,
    )
    return TestClient(create_app(context))


def test_banner_lists_endpoints(client):
    body = client.get("/").json()
    assert body["status"] == "ok"
    assert body["version"] == "2.0.0"
    assert "PUT /api/simulation/settings" in body["endpoints"]


def test_health(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["stocksAvailable"] == 3
    assert body["timestamp"] == FIXED_NOW.isoformat()
    assert body["marketStatus"]["isOpen"] is True
    assert body["simulationSettings"]["speed"] == 1


def test_market_status(client):
    data = client.get("/api/market/status").json()["data"]
    assert data["reason"] == "Simulation Mode - Always Open"
    assert data["timezone"] == "IST (UTC+5:30)"
    assert data["tradingHours"] == "24/7 Practice Mode"
    assert data["simulationMode"] is True


def test_list_stocks_excludes_indices(client):
    body = client.get("/api/stocks").json()
    assert body["success"] is True
    assert body["count"] == 2
    assert body["isSimulated"] is True
    assert body["disclaimer"].startswith("SIMULATED DATA")
    assert {s["symbol"] for s in body["data"]} == {"FOO.NS", "BAR.NS"}


def test_quote_shape(client):
    data = client.get("/api/stocks/foo").json()["data"]
    assert data["symbol"] == "FOO.NS"
    assert data["previousClose"] == 100.0
    assert data["changePercent"] == round(data["changePercent"], 2)
    assert data["low"] <= data["price"] <= data["high"]
    assert set(data) >= {"bid", "ask", "bidSize", "askSize", "lastUpdated", "sector"}


def test_unknown_stock_is_404(client):
    response = client.get("/api/stocks/nope")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Stock not found"}


def test_indices(client):
    data = client.get("/api/indices").json()["data"]
    assert [q["symbol"] for q in data] == ["^FOOX"]


def test_batch(client):
    response = client.post("/api/stocks/batch", json={"symbols": ["foo", "nope", "bar"]})
    assert [q["symbol"] for q in response.json()["data"]] == ["FOO.NS", "BAR.NS"]


@pytest.mark.parametrize("payload", [{}, {"symbols": "FOO"}, {"symbols": None}])
def test_batch_without_symbol_list_is_400(client, payload):
    response = client.post("/api/stocks/batch", json=payload)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "symbols array required"}


def test_history(client):
    body = client.get("/api/stocks/foo/history", params={"range": "5d"}).json()
    assert body["symbol"] == "FOO.NS"
    assert body["range"] == "5d"
    assert [c["date"] for c in body["data"]][-1] == "2024-01-10"


def test_history_of_unknown_stock_is_404(client):
    response = client.get("/api/stocks/nope/history")
    assert response.status_code == 404
    assert response.json()["error"] == "Stock history not found"


def test_depth(client):
    data = client.get("/api/stocks/bar/depth").json()["data"]
    assert len(data["bids"]) == len(data["asks"]) == 5
    assert data["totalBidQty"] == sum(level["quantity"] for level in data["bids"])


def test_search(client):
    assert [q["symbol"] for q in client.get("/api/search", params={"q": "bank"}).json()["data"]] == ["BAR.NS"]
    assert client.get("/api/search").json() == {"success": True, "data": []}


def test_movers_and_sectors(client):
    for path in ("/api/market/gainers", "/api/market/losers", "/api/market/active"):
        assert len(client.get(path).json()["data"]) == 2
    sectors = client.get("/api/market/sectors").json()["data"]
    assert {s["name"] for s in sectors} == {"IT", "Banking"}


def test_overview(client):
    data = client.get("/api/market/overview").json()["data"]
    assert data["marketBreadth"]["total"] == 2
    assert data["lastUpdated"] == FIXED_NOW.isoformat()


def test_settings_roundtrip(client, sim_context):
    body = client.get("/api/simulation/settings").json()
    assert body["data"]["priceTickSize"] == 0.05
    assert "alwaysOpen" in body["description"]

    response = client.put("/api/simulation/settings", json={"speed": 2, "maxTickMultiplier": 50, "bogus": 1})
    assert response.json()["message"] == "Simulation settings updated"
    assert response.json()["data"]["speed"] == 2
    assert response.json()["data"]["maxTickMultiplier"] == 5
    assert sim_context.engine.settings.speed == 2


def test_closing_the_market_shows_in_status(client):
    client.put("/api/simulation/settings", json={"alwaysOpen": False})
    data = client.get("/api/market/status").json()["data"]
    assert data["reason"] == "Market Open"
    assert data["tradingHours"] == "9:15 AM - 3:30 PM IST"


def test_reset(client, sim_context):
    store = sim_context.store
    quote = store.get("FOO.NS")
    store.set("FOO.NS", quote.with_price(quote.price * 1.5, quote.volume, 100, 100, 0))

    body = client.post("/api/simulation/reset").json()

    assert body["success"] is True
    assert store.get("FOO.NS").previous_close == 100.0
    assert store.get("FOO.NS").price < 103


def test_lifespan_runs_the_price_timer(sim_context):
    with TestClient(create_app(sim_context)):
        assert sim_context.engine.is_running
    assert not sim_context.engine.is_running


def test_live_variant_flags_real_data(live_client):
    body = live_client.get("/api/stocks/foo").json()
    assert body["isRealData"] is True
    assert body["dataSource"] == "Yahoo Finance"
    assert body["data"]["symbol"] == "FOO.NS"


def test_live_variant_has_no_simulation_routes(live_client):
    assert live_client.get("/api/simulation/settings").status_code == 404
    assert "PUT /api/simulation/settings" not in live_client.get("/").json()["endpoints"]


def test_live_unknown_stock_is_404(live_client):
    response = live_client.get("/api/stocks/badsym")
    assert response.status_code == 404


def test_live_search_returns_metadata_only(live_client):
    data = live_client.get("/api/search", params={"q": "bank"}).json()["data"]
    assert data == [{"symbol": "BAR.NS", "name": "Bar Bank", "sector": "Banking"}]
    assert live_client.get("/api/search", params={"q": "b"}).json()["data"] == []


def test_live_history_reports_interval(live_client):
    body = live_client.get("/api/stocks/foo/history", params={"range": "1mo"}).json()
    assert body["interval"] == "auto"
    assert body["data"][0]["close"] == 100.5


def test_symbol_spellings_resolve_to_the_same_record(client):
    assert client.get("/api/stocks/FOO").json() == client.get("/api/stocks/foo.ns").json()


def test_empty_catalog_is_respected():
    config = AppConfig(seed=7, history_days=30)
    simulated = build_simulated_context(config, clock=lambda: FIXED_NOW, catalog={})
    live = build_live_context(config, provider=FakeProvider(), clock=lambda: FIXED_NOW, catalog={})

    assert simulated.source.symbol_count() == 0
    assert live.source.symbol_count() == 0
