"""
Builds a FastAPI app around an AppContext.

Kept apart from the composition-root modules so tests can build an app from
their own context without triggering the module-level wiring.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from market_sim.infrastructure.entrypoints.context import VERSION, AppContext
from market_sim.infrastructure.entrypoints.routes import (
    create_market_router,
    create_simulation_router,
    register_exception_handlers,
)

logger = logging.getLogger(__name__)


def create_app(context: AppContext) -> FastAPI:
    """Wire routers, CORS and error handlers; the lifespan owns the price timer."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if context.engine is not None:
            context.engine.start()
        logger.info(
            "%s running on port %d (%d stocks available)",
            context.service,
            context.config.port,
            context.source.symbol_count(),
        )
        yield
        if context.engine is not None:
            context.engine.stop()

    title = "Stock Market Simulator API" if context.is_simulated else "Stock Market Live Data API"
    app = FastAPI(title=title, version=VERSION, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(context.config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(create_market_router(context))
    if context.is_simulated:
        app.include_router(create_simulation_router(context))
    return app
