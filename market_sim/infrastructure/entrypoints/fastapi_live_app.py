"""
FastAPI entry point for the live data proxy (Yahoo Finance via yfinance).

Same HTTP surface as the simulated app, minus the simulation control routes.

Run locally:
    uvicorn market_sim.infrastructure.entrypoints.fastapi_live_app:app --port 3003
"""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from market_sim.infrastructure.config.app_config import AppConfig, configure_logging
from market_sim.infrastructure.entrypoints.app_factory import create_app
from market_sim.infrastructure.entrypoints.context import LIVE_PORT, build_live_context

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_config = AppConfig.from_env(default_port=LIVE_PORT)
configure_logging(_config.log_level)
_context = build_live_context(_config)

app = create_app(_context)


def main() -> None:
    uvicorn.run(app, host=_config.host, port=_config.port, log_level=_config.log_level.lower())


if __name__ == "__main__":
    main()
