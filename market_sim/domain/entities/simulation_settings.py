"""
Domain entity for the tunable simulation settings.
Zero external dependencies: pure Python dataclasses only.

Settings are immutable; a change produces a new record via merge(). Field
names in *partial* mappings are the camelCase names used on the wire.
"""

import math
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional

ALLOWED_TICK_SIZES: tuple[float, ...] = (0.01, 0.05, 0.10, 0.25, 0.50, 1.00)

MIN_UPDATE_INTERVAL_MS = 500
MAX_UPDATE_INTERVAL_MS = 10_000


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if math.isfinite(value) else None


def _speed(value: Any) -> Optional[float]:
    v = _number(value)
    return v if v is not None and 0 < v <= 10 else None


def _volatility_multiplier(value: Any) -> Optional[float]:
    v = _number(value)
    return v if v is not None and 0 < v <= 5 else None


def _update_interval(value: Any) -> Optional[float]:
    v = _number(value)
    return v if v is not None and MIN_UPDATE_INTERVAL_MS <= v <= MAX_UPDATE_INTERVAL_MS else None


def _always_open(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _price_tick_size(value: Any) -> Optional[float]:
    v = _number(value)
    if v is None:
        return None
    return next((t for t in ALLOWED_TICK_SIZES if math.isclose(t, v)), None)


def _max_tick_multiplier(value: Any) -> Optional[int]:
    v = _number(value)
    return int(math.floor(v)) if v is not None and 1 <= v <= 10 else None


# wire name -> (attribute, validator returning the coerced value or None)
FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "speed": ("speed", _speed),
    "volatilityMultiplier": ("volatility_multiplier", _volatility_multiplier),
    "updateInterval": ("update_interval", _update_interval),
    "alwaysOpen": ("always_open", _always_open),
    "priceTickSize": ("price_tick_size", _price_tick_size),
    "maxTickMultiplier": ("max_tick_multiplier", _max_tick_multiplier),
}


@dataclass(frozen=True)
class SimulationSettings:
    speed: float = 1
    volatility_multiplier: float = 1
    update_interval: float = 2000
    always_open: bool = True
    price_tick_size: float = 0.05
    max_tick_multiplier: int = 5

    @property
    def interval_ms(self) -> float:
        """Timer cadence: the base interval scaled by speed, never below 500 ms."""
        return max(float(MIN_UPDATE_INTERVAL_MS), self.update_interval / self.speed)

    def merge(self, partial: Mapping[str, Any]) -> "SimulationSettings":
        """Return a copy with every valid field of *partial* applied.

        Each field is validated on its own; invalid or unknown fields are
        ignored rather than rejected.
        """
        changes = {}
        for key, value in partial.items():
            if key not in FIELDS:
                continue
            attr, validate = FIELDS[key]
            coerced = validate(value)
            if coerced is not None:
                changes[attr] = coerced
        return replace(self, **changes) if changes else self


def ignored_fields(partial: Mapping[str, Any]) -> list[str]:
    """Names in *partial* that merge() would not apply."""
    return [
        key for key, value in partial.items()
        if key not in FIELDS or FIELDS[key][1](value) is None
    ]
