"""
Simulation engine: advances every quote in the PriceStore on a timer.

A single daemon thread fires tick() every settings.interval_ms. Ticks never
overlap: a non-blocking guard drops a tick that arrives while another is in
flight, and rescheduling joins the old timer thread before arming a new one.
"""

import logging
import random
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, Optional

from market_sim.application.services.market_clock import market_status
from market_sim.application.services.price_store import MAX_DISPLAY_SIZE, MIN_DISPLAY_SIZE, PriceStore
from market_sim.application.services.volatility import volatility_of
from market_sim.domain.entities.quote import Quote
from market_sim.domain.entities.simulation_settings import SimulationSettings

logger = logging.getLogger(__name__)

BASE_MOVEMENT_CHANCE = 0.7
MAX_VOLUME_INCREMENT = 50_000


class SimulationEngine:
    def __init__(
        self,
        store: PriceStore,
        settings: SimulationSettings,
        rng: random.Random,
        clock: Callable[[], datetime],
    ) -> None:
        self._store = store
        self._settings = settings
        self._rng = rng
        self._clock = clock
        self._tick_guard = threading.Lock()
        self._timer_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    @property
    def settings(self) -> SimulationSettings:
        return self._settings

    @property
    def interval_seconds(self) -> float:
        return self._settings.interval_ms / 1000.0

    @property
    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    # ------------------------------------------------------------------
    # Price walk
    # ------------------------------------------------------------------

    def tick(self, settings: Optional[SimulationSettings] = None) -> int:
        """Advance every symbol once. Returns how many symbols moved.

        Does nothing when the market is closed, or when another tick is
        still running.
        """
        if not self._tick_guard.acquire(blocking=False):
            logger.debug("Tick skipped: previous tick still in flight")
            return 0
        try:
            return self._tick(settings or self._settings)
        finally:
            self._tick_guard.release()

    def _tick(self, settings: SimulationSettings) -> int:
        now = self._clock()
        if not market_status(settings.always_open, now, settings.speed).is_open:
            return 0

        now_ms = int(now.timestamp() * 1000)
        moved = 0
        for quote in self._store.get_all():
            updated = self._advance(quote, settings, now_ms)
            if updated is not None:
                self._store.set(quote.symbol, updated)
                moved += 1
        return moved

    def _advance(self, quote: Quote, settings: SimulationSettings, now_ms: int) -> Optional[Quote]:
        rng = self._rng
        volatility = volatility_of(quote.sector) * settings.speed * settings.volatility_multiplier

        ticks = rng.randint(1, settings.max_tick_multiplier)
        tick_value = settings.price_tick_size * ticks

        # Illiquid moment: no trade prints for this symbol this time round.
        if rng.random() > BASE_MOVEMENT_CHANCE + volatility * 5:
            return None

        delta = tick_value if rng.uniform(-1, 1) > 0 else -tick_value
        new_price = max(quote.price + delta, quote.price * 0.5)

        return quote.with_price(
            new_price,
            volume=quote.volume + rng.randrange(0, MAX_VOLUME_INCREMENT),
            bid_size=rng.randrange(MIN_DISPLAY_SIZE, MAX_DISPLAY_SIZE),
            ask_size=rng.randrange(MIN_DISPLAY_SIZE, MAX_DISPLAY_SIZE),
            last_updated=now_ms,
        )

    @contextmanager
    def paused(self) -> Iterator[None]:
        """Hold off ticks for the duration of the block (waits for one in flight)."""
        with self._tick_guard:
            yield

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def apply_settings(self, settings: SimulationSettings) -> None:
        """Swap in new settings; a running timer is re-armed with the new cadence."""
        with self._timer_lock:
            self._settings = settings
            if self.is_running:
                self._disarm()
                self._arm()

    def start(self) -> None:
        with self._timer_lock:
            if self.is_running:
                return
            self._arm()

    def stop(self) -> None:
        with self._timer_lock:
            self._disarm()
        logger.info("Price updates stopped")

    def _arm(self) -> None:
        interval = self.interval_seconds
        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._run,
            args=(stop_event, interval),
            daemon=True,
            name="price-simulation",
        )
        self._stop_event = stop_event
        self._thread = thread
        thread.start()
        logger.info(
            "Price updates running every %dms (speed: %sx)",
            interval * 1000,
            self._settings.speed,
        )

    def _disarm(self) -> None:
        thread, stop_event = self._thread, self._stop_event
        self._thread = None
        self._stop_event = None
        if thread is None or stop_event is None:
            return
        stop_event.set()
        if thread is not threading.current_thread():
            thread.join()

    def _run(self, stop_event: threading.Event, interval: float) -> None:
        while not stop_event.wait(interval):
            try:
                self.tick()
            except Exception:
                logger.exception("Price update failed")
