"""
Process configuration read from environment variables.

Entrypoints call load_dotenv() before AppConfig.from_env(), so a local .env
file works the same way as real environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from market_sim.domain.entities.simulation_settings import SimulationSettings, ignored_fields

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


# env var -> (settings field on the wire, parser)
_SETTINGS_ENV = {
    "MARKET_SIM_SPEED": ("speed", float),
    "MARKET_SIM_VOLATILITY_MULTIPLIER": ("volatilityMultiplier", float),
    "MARKET_SIM_UPDATE_INTERVAL_MS": ("updateInterval", float),
    "MARKET_SIM_ALWAYS_OPEN": ("alwaysOpen", _parse_bool),
    "MARKET_SIM_TICK_SIZE": ("priceTickSize", float),
    "MARKET_SIM_MAX_TICK_MULTIPLIER": ("maxTickMultiplier", float),
}


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value not in (None, "") else None


@dataclass(frozen=True)
class AppConfig:
    host: str = "0.0.0.0"
    port: int = 3002
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)
    seed: Optional[int] = None
    simulation: SimulationSettings = field(default_factory=SimulationSettings)
    history_days: int = 365
    live_quote_ttl: float = 5.0
    live_history_ttl: float = 300.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ, default_port: int = 3002) -> "AppConfig":
        """Build the config from *environ*.

        Simulation settings go through the same validation as the settings
        endpoint: out-of-range values are dropped with a warning.

        Raises:
            ValueError: if a numeric or boolean variable cannot be parsed.
        """
        partial: dict[str, Any] = {}
        for name, (key, parse) in _SETTINGS_ENV.items():
            raw = environ.get(name)
            if raw not in (None, ""):
                partial[key] = parse(raw)
        for key in ignored_fields(partial):
            logger.warning("Ignoring out-of-range simulation setting %s=%r", key, partial[key])

        origins = tuple(o.strip() for o in environ.get("CORS_ORIGINS", "*").split(",") if o.strip())
        return cls(
            host=environ.get("HOST", "0.0.0.0"),
            port=int(environ.get("PORT", default_port)),
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
            cors_origins=origins or ("*",),
            seed=_optional_int(environ.get("MARKET_SIM_SEED")),
            simulation=SimulationSettings().merge(partial),
            history_days=int(environ.get("MARKET_SIM_HISTORY_DAYS", 365)),
            live_quote_ttl=float(environ.get("LIVE_QUOTE_TTL_SECONDS", 5)),
            live_history_ttl=float(environ.get("LIVE_HISTORY_TTL_SECONDS", 300)),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
