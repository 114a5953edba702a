import threading

import pytest

from fakes import FIXED_NOW, SUNDAY, FrozenRandom, MoveDownRandom
from market_sim.application.services.simulation_engine import SimulationEngine
from market_sim.domain.entities.quote import Quote
from market_sim.domain.entities.simulation_settings import SimulationSettings

NOW_MS = int(FIXED_NOW.timestamp() * 1000)


def test_tick_moves_every_symbol_up_by_one_tick(store, engine):
    before = {q.symbol: q for q in store.get_all()}

    assert engine.tick() == len(before)

    for symbol, old in before.items():
        new = store.get(symbol)
        assert new.price == round(old.price + 0.05, 2)
        assert new.previous_close == old.previous_close
        assert new.volume == old.volume
        assert new.last_updated == NOW_MS
        assert new.low <= new.price <= new.high
        assert new.change_percent == pytest.approx((new.price - new.previous_close) / new.previous_close * 100)


def test_tick_size_and_multiplier_come_from_settings(store, engine):
    before = store.get("BAR.NS").price
    engine.tick(SimulationSettings(price_tick_size=1.0, max_tick_multiplier=1))
    assert store.get("BAR.NS").price == round(before + 1.0, 2)


def test_no_movement_when_draw_misses_threshold(store, clock):
    before = store.get_all()
    engine = SimulationEngine(store, SimulationSettings(), FrozenRandom(), clock)
    assert engine.tick() == 0
    assert store.get_all() == before


def test_closed_market_freezes_prices(store):
    before = store.get_all()
    engine = SimulationEngine(store, SimulationSettings(always_open=False), MoveDownRandom(), lambda: SUNDAY)
    assert engine.tick() == 0
    assert store.get_all() == before


def test_price_is_floored_at_half_the_previous_price(store, clock):
    cheap = Quote.create(
        symbol="FOO.NS",
        name="Foo Technologies",
        sector="IT",
        price=0.06,
        previous_close=0.06,
        open=0.06,
        high=0.06,
        low=0.06,
        volume=0,
        bid_size=100,
        ask_size=100,
        last_updated=0,
    )
    store.set("FOO.NS", cheap)
    engine = SimulationEngine(store, SimulationSettings(price_tick_size=1.0), MoveDownRandom(), clock)

    engine.tick()

    moved = store.get("FOO.NS")
    assert moved.price == 0.03
    assert moved.low == 0.03
    assert moved.price > 0


def test_overlapping_tick_is_dropped(store, engine):
    before = store.get_all()
    with engine.paused():
        assert engine.tick() == 0
    assert store.get_all() == before


@pytest.mark.parametrize(
    "update_interval, speed, seconds",
    [(2000, 1, 2.0), (2000, 2, 1.0), (2000, 10, 0.5), (500, 0.5, 1.0), (10000, 1, 10.0)],
)
def test_interval_scales_with_speed_and_never_drops_below_500ms(store, clock, update_interval, speed, seconds):
    settings = SimulationSettings(update_interval=update_interval, speed=speed)
    engine = SimulationEngine(store, settings, FrozenRandom(), clock)
    assert engine.interval_seconds == pytest.approx(seconds)


def test_start_and_stop_timer(store, clock):
    engine = SimulationEngine(store, SimulationSettings(update_interval=10000), FrozenRandom(), clock)
    engine.start()
    assert engine.is_running
    engine.stop()
    assert not engine.is_running


def test_apply_settings_rearms_running_timer(store, clock):
    engine = SimulationEngine(store, SimulationSettings(update_interval=10000), FrozenRandom(), clock)
    engine.start()
    first = engine._thread

    engine.apply_settings(SimulationSettings(update_interval=9000))

    assert engine.is_running
    assert engine._thread is not first
    assert not first.is_alive()
    assert engine.interval_seconds == pytest.approx(9.0)
    engine.stop()


def test_apply_settings_does_not_start_a_stopped_engine(engine):
    engine.apply_settings(SimulationSettings(speed=3))
    assert not engine.is_running
    assert engine.settings.speed == 3


def test_timer_thread_ticks(store, clock):
    ticked = threading.Event()

    class SpyEngine(SimulationEngine):
        def tick(self, settings=None):
            ticked.set()
            return 0

    engine = SpyEngine(store, SimulationSettings(update_interval=500), FrozenRandom(), clock)
    engine.start()
    try:
        assert ticked.wait(timeout=5)
    finally:
        engine.stop()


def test_settings_change_racing_stop_never_leaves_a_timer_running(store, clock):
    engine = SimulationEngine(store, SimulationSettings(update_interval=10000), FrozenRandom(), clock)
    for _ in range(20):
        engine.start()
        updater = threading.Thread(
            target=engine.apply_settings, args=(SimulationSettings(update_interval=9000),)
        )
        updater.start()
        engine.stop()
        updater.join()
        assert not engine.is_running
