import random

import pytest

from fakes import FIXED_NOW, MoveUpRandom
from market_sim.application.services.price_store import PriceStore
from market_sim.application.services.simulation_engine import SimulationEngine
from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.entities.simulation_settings import SimulationSettings


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def catalog():
    return {
        "FOO.NS": CatalogEntry("FOO.NS", "Foo Technologies", "IT", 100.0),
        "BAR.NS": CatalogEntry("BAR.NS", "Bar Bank", "Banking", 500.0),
        "^FOOX": CatalogEntry("^FOOX", "Foo Index", "Index", 20000.0),
    }


@pytest.fixture
def store(catalog, rng, clock):
    price_store = PriceStore(catalog, rng, clock, history_days=30)
    price_store.init()
    return price_store


@pytest.fixture
def settings():
    return SimulationSettings()


@pytest.fixture
def engine(store, settings, clock):
    simulation = SimulationEngine(store, settings, MoveUpRandom(), clock)
    yield simulation
    simulation.stop()
