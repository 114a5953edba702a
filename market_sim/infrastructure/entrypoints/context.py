"""
Composition Root: wires adapters and services into an AppContext per variant.

Both FastAPI apps build their routes from an AppContext, so everything the
routes touch (data source, engine, settings, random source, clock) is owned
by one explicitly constructed object rather than module globals.
"""

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from market_sim.application.services.live_market import LiveMarketDataSource
from market_sim.application.services.order_book import LIVE_DEPTH, SIMULATED_DEPTH, DepthProfile
from market_sim.application.services.price_store import PriceStore
from market_sim.application.services.settings_controller import SettingsController
from market_sim.application.services.simulated_market import SimulatedMarketDataSource
from market_sim.application.services.simulation_engine import SimulationEngine
from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.ports.market_data_port import IMarketDataSource
from market_sim.domain.ports.quote_provider_port import IQuoteProvider
from market_sim.infrastructure.catalog.nse_catalog import load_catalog
from market_sim.infrastructure.config.app_config import AppConfig

SIMULATED_PORT = 3002
LIVE_PORT = 3003
VERSION = "2.0.0"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AppContext:
    mode: str
    service: str
    config: AppConfig
    source: IMarketDataSource
    rng: random.Random
    clock: Callable[[], datetime] = utc_now
    depth_profile: DepthProfile = SIMULATED_DEPTH
    search_limit: int = 10
    mover_universe: Optional[int] = None
    overview_universe: Optional[int] = None
    # merged into most list/quote responses
    flags: dict[str, Any] = field(default_factory=dict)
    store: Optional[PriceStore] = None
    engine: Optional[SimulationEngine] = None
    settings: Optional[SettingsController] = None

    @property
    def is_simulated(self) -> bool:
        return self.engine is not None


def build_simulated_context(
    config: AppConfig,
    clock: Callable[[], datetime] = utc_now,
    catalog: Optional[Mapping[str, CatalogEntry]] = None,
) -> AppContext:
    """Seed the price store and wire the engine; the timer is not started here."""
    rng = random.Random(config.seed)
    if catalog is None:
        catalog = load_catalog()
    store = PriceStore(catalog, rng, clock, history_days=config.history_days)
    store.init()
    engine = SimulationEngine(store, config.simulation, rng, clock)
    return AppContext(
        mode="simulation",
        service="Stock Market Server - SIMULATION",
        config=config,
        source=SimulatedMarketDataSource(store, engine, clock),
        rng=rng,
        clock=clock,
        depth_profile=SIMULATED_DEPTH,
        search_limit=10,
        flags={"isSimulated": True},
        store=store,
        engine=engine,
        settings=SettingsController(store, engine),
    )


def build_live_context(
    config: AppConfig,
    provider: Optional[IQuoteProvider] = None,
    clock: Callable[[], datetime] = utc_now,
    catalog: Optional[Mapping[str, CatalogEntry]] = None,
) -> AppContext:
    """Wire the live source around *provider* (YFinanceQuoteProvider by default)."""
    rng = random.Random(config.seed)
    if catalog is None:
        catalog = load_catalog()
    if provider is None:
        # imported lazily so the simulated app never loads yfinance
        from market_sim.infrastructure.stock_data.yfinance_adapter import YFinanceQuoteProvider

        provider = YFinanceQuoteProvider(catalog, rng)
    source = LiveMarketDataSource(
        provider,
        catalog,
        clock,
        quote_ttl=config.live_quote_ttl,
        history_ttl=config.live_history_ttl,
    )
    return AppContext(
        mode="live",
        service="Stock Market Server - LIVE DATA",
        config=config,
        source=source,
        rng=rng,
        clock=clock,
        depth_profile=LIVE_DEPTH,
        search_limit=15,
        mover_universe=50,
        overview_universe=20,
        flags={"isRealData": True, "dataSource": "Yahoo Finance"},
    )
