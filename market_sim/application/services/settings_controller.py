"""
Settings controller: the only way simulation settings change at runtime.
"""

import logging
import threading
from typing import Any, Mapping

from market_sim.application.services.price_store import PriceStore
from market_sim.application.services.simulation_engine import SimulationEngine
from market_sim.domain.entities.simulation_settings import SimulationSettings, ignored_fields

logger = logging.getLogger(__name__)


class SettingsController:
    def __init__(self, store: PriceStore, engine: SimulationEngine) -> None:
        self._store = store
        self._engine = engine
        self._update_lock = threading.Lock()

    def get(self) -> SimulationSettings:
        return self._engine.settings

    def update(self, partial: Mapping[str, Any]) -> SimulationSettings:
        """Apply every valid field of *partial*; invalid fields are ignored.

        The engine is only rescheduled when the settings actually changed.
        """
        ignored = ignored_fields(partial)
        if ignored:
            logger.debug("Ignoring invalid simulation settings: %s", ", ".join(ignored))
        # read, merge and apply under one lock
        with self._update_lock:
            current = self._engine.settings
            updated = current.merge(partial)
            if updated != current:
                self._engine.apply_settings(updated)
                logger.info("Simulation settings updated: %s", updated)
        return updated

    def reset(self) -> None:
        """Restore all prices to base values; settings are left as they are."""
        with self._engine.paused():
            self._store.reset()
        logger.info("Simulation reset - all prices restored to base values")
