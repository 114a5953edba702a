"""
FastAPI entry point for the simulated exchange.

This module is the Composition Root for the simulated variant: it reads the
environment, seeds the price store and hands the context to create_app().
The price timer starts with the app's lifespan and stops on shutdown.

Run locally:
    uvicorn market_sim.infrastructure.entrypoints.fastapi_app:app --port 3002
"""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from market_sim.infrastructure.config.app_config import AppConfig, configure_logging
from market_sim.infrastructure.entrypoints.app_factory import create_app
from market_sim.infrastructure.entrypoints.context import SIMULATED_PORT, build_simulated_context

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_config = AppConfig.from_env(default_port=SIMULATED_PORT)
configure_logging(_config.log_level)
_context = build_simulated_context(_config)

app = create_app(_context)


def main() -> None:
    uvicorn.run(app, host=_config.host, port=_config.port, log_level=_config.log_level.lower())


if __name__ == "__main__":
    main()
