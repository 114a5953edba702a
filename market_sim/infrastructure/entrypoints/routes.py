"""
FastAPI routers: infrastructure entrypoint.

HTTP routing is an infrastructure concern and must NOT appear in the
application or domain layers. Each factory binds the application use-cases
to route handlers once, with the dependencies held by an AppContext.

Handlers are plain ``def`` functions: FastAPI runs them on its threadpool,
which is where blocking reads (store lock, upstream HTTP) belong.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from market_sim.application.use_cases.get_market_depth import GetMarketDepthUseCase
from market_sim.application.use_cases.get_market_movers import GetMarketMoversUseCase, MoverKind
from market_sim.application.use_cases.get_market_overview import GetMarketOverviewUseCase
from market_sim.application.use_cases.get_price_history import GetPriceHistoryUseCase
from market_sim.application.use_cases.get_sector_performance import GetSectorPerformanceUseCase
from market_sim.application.use_cases.get_stock_quote import GetBatchQuotesUseCase, GetStockQuoteUseCase
from market_sim.application.use_cases.search_symbols import SearchSymbolsUseCase
from market_sim.domain.errors import InvalidRequestError, StockNotFoundError
from market_sim.infrastructure.entrypoints.context import VERSION, AppContext
from market_sim.infrastructure.entrypoints.presenters import (
    candle_to_dict,
    order_book_to_dict,
    overview_to_dict,
    quote_to_dict,
    quotes_to_list,
    search_result_to_dict,
    sector_to_dict,
    settings_to_dict,
    status_to_dict,
)

logger = logging.getLogger(__name__)

DISCLAIMER = "SIMULATED DATA - For Paper Trading & Learning Only. Not Real Market Prices."

SETTINGS_DESCRIPTION = {
    "speed": "Price update speed multiplier (0.5x, 1x, 2x, 5x)",
    "volatilityMultiplier": "Price volatility multiplier (higher = more movement)",
    "updateInterval": "Base update interval in milliseconds",
    "alwaysOpen": "If true, market is always open for practice trading",
    "priceTickSize": "Price increment per tick (0.01, 0.05, 0.10, 0.25, 0.50, 1.00)",
    "maxTickMultiplier": "Maximum ticks a price can move per update (1-10)",
}

MARKET_ENDPOINTS = [
    "GET /api/health",
    "GET /api/market/status",
    "GET /api/stocks",
    "GET /api/indices",
    "GET /api/stocks/:symbol",
    "POST /api/stocks/batch",
    "GET /api/stocks/:symbol/history",
    "GET /api/stocks/:symbol/depth",
    "GET /api/search?q=...",
    "GET /api/market/gainers",
    "GET /api/market/losers",
    "GET /api/market/active",
    "GET /api/market/sectors",
    "GET /api/market/overview",
]

SIMULATION_ENDPOINTS = [
    "GET /api/simulation/settings",
    "PUT /api/simulation/settings",
    "POST /api/simulation/reset",
]


class BatchQuotesRequest(BaseModel):
    # validated by GetBatchQuotesUseCase
    symbols: Any = None


def create_market_router(context: AppContext) -> APIRouter:
    """Build the read-only market data routes shared by both variants.

    Args:
        context: AppContext from build_simulated_context() or build_live_context().

    Returns:
        APIRouter to be included in the FastAPI app.
    """
    source = context.source
    flags = context.flags
    quote_uc = GetStockQuoteUseCase(source)
    batch_uc = GetBatchQuotesUseCase(source)
    history_uc = GetPriceHistoryUseCase(source)
    depth_uc = GetMarketDepthUseCase(source, context.rng, context.depth_profile)
    search_uc = SearchSymbolsUseCase(source, context.search_limit)
    movers_uc = GetMarketMoversUseCase(source, universe=context.mover_universe)
    sectors_uc = GetSectorPerformanceUseCase(source, universe=context.mover_universe)
    overview_uc = GetMarketOverviewUseCase(source, context.clock, universe=context.overview_universe)

    router = APIRouter()

    def now_iso() -> str:
        return context.clock().isoformat()

    def simulation_extras() -> dict[str, Any]:
        if context.engine is None:
            return {}
        return {"simulationSettings": settings_to_dict(context.engine.settings)}

    @router.get("/")
    def banner():
        endpoints = MARKET_ENDPOINTS + (SIMULATION_ENDPOINTS if context.is_simulated else [])
        body: dict[str, Any] = {
            "status": "ok",
            "service": context.service,
            "version": VERSION,
        }
        if context.is_simulated:
            body["mode"] = "Paper Trading (24/7)"
        else:
            body["dataSource"] = "Yahoo Finance (Real-Time)"
        return {**body, **simulation_extras(), "endpoints": endpoints}

    @router.get("/api/health")
    def health():
        body: dict[str, Any] = {
            "status": "ok",
            "service": context.service,
            "port": context.config.port,
            "timestamp": now_iso(),
            "stocksAvailable": source.symbol_count(),
            "marketStatus": status_to_dict(source.market_status()),
        }
        if context.is_simulated:
            body["mode"] = "Paper Trading (24/7)"
        return {**body, **flags, **simulation_extras()}

    @router.get("/api/market/status")
    def market_status():
        status = status_to_dict(source.market_status())
        if context.is_simulated:
            always_open = context.engine.settings.always_open
            extras = {
                "exchange": "NSE/BSE (Simulated)",
                "tradingHours": "24/7 Practice Mode" if always_open else "9:15 AM - 3:30 PM IST",
                "simulationMode": True,
                **simulation_extras(),
            }
        else:
            extras = {
                "exchange": "NSE/BSE",
                "tradingHours": "9:15 AM - 3:30 PM IST",
                "dataSource": "Yahoo Finance (Real-Time)",
            }
        data = {**status, "timezone": "IST (UTC+5:30)", "serverTime": now_iso(), **extras}
        return {"success": True, "data": data}

    @router.get("/api/stocks")
    def list_stocks():
        stocks = source.list_stocks()
        body: dict[str, Any] = {
            "success": True,
            "data": quotes_to_list(stocks),
            "count": len(stocks),
            "marketStatus": status_to_dict(source.market_status()),
        }
        if context.is_simulated:
            body["disclaimer"] = DISCLAIMER
        else:
            body["lastUpdated"] = now_iso()
        return {**body, **flags}

    @router.get("/api/indices")
    def list_indices():
        return {"success": True, "data": quotes_to_list(source.list_indices()), **flags}

    @router.post("/api/stocks/batch")
    def batch_quotes(body: Optional[BatchQuotesRequest] = None):
        symbols = body.symbols if body is not None else None
        return {"success": True, "data": quotes_to_list(batch_uc.execute(symbols)), **flags}

    @router.get("/api/stocks/{symbol}")
    def get_stock(symbol: str):
        return {"success": True, "data": quote_to_dict(quote_uc.execute(symbol)), **flags}

    @router.get("/api/stocks/{symbol}/history")
    def get_history(
        symbol: str,
        range_key: str = Query("1y", alias="range"),
        interval: Optional[str] = None,
    ):
        history = history_uc.execute(symbol, range_key, interval)
        body: dict[str, Any] = {
            "success": True,
            "data": [candle_to_dict(c) for c in history.candles],
            "symbol": history.symbol,
            "range": history.range,
        }
        if not context.is_simulated:
            body["interval"] = history.interval or "auto"
        return {**body, **flags}

    @router.get("/api/stocks/{symbol}/depth")
    def get_depth(symbol: str):
        body: dict[str, Any] = {"success": True, "data": order_book_to_dict(depth_uc.execute(symbol))}
        if not context.is_simulated:
            body["note"] = "Order book depth is indicative"
        return body

    @router.get("/api/search")
    def search(q: Optional[str] = None):
        return {"success": True, "data": [search_result_to_dict(r) for r in search_uc.execute(q)]}

    @router.get("/api/market/gainers")
    def gainers():
        return {"success": True, "data": quotes_to_list(movers_uc.execute(MoverKind.GAINERS)), **flags}

    @router.get("/api/market/losers")
    def losers():
        return {"success": True, "data": quotes_to_list(movers_uc.execute(MoverKind.LOSERS)), **flags}

    @router.get("/api/market/active")
    def active():
        return {"success": True, "data": quotes_to_list(movers_uc.execute(MoverKind.ACTIVE)), **flags}

    @router.get("/api/market/sectors")
    def sectors():
        return {"success": True, "data": [sector_to_dict(s) for s in sectors_uc.execute()]}

    @router.get("/api/market/overview")
    def overview():
        data = overview_to_dict(overview_uc.execute())
        if not context.is_simulated:
            data.update(flags)
        return {"success": True, "data": data}

    return router


def create_simulation_router(context: AppContext) -> APIRouter:
    """Build the simulation control routes (simulated variant only)."""
    controller = context.settings
    if controller is None:
        raise ValueError("simulation routes need a simulated AppContext")

    router = APIRouter(prefix="/api/simulation")

    @router.get("/settings")
    def get_settings():
        return {
            "success": True,
            "data": settings_to_dict(controller.get()),
            "description": SETTINGS_DESCRIPTION,
        }

    @router.put("/settings")
    def update_settings(body: Optional[dict[str, Any]] = Body(None)):
        updated = controller.update(body or {})
        return {
            "success": True,
            "message": "Simulation settings updated",
            "data": settings_to_dict(updated),
        }

    @router.post("/reset")
    def reset():
        controller.reset()
        return {
            "success": True,
            "message": "Simulation reset - all prices restored to base values",
        }

    return router


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors onto the ``{success: false, error}`` envelope."""

    async def not_found(request: Request, exc: StockNotFoundError):
        return _error(404, str(exc))

    async def invalid(request: Request, exc: InvalidRequestError):
        return _error(400, str(exc))

    async def validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        return _error(400, errors[0].get("msg", "Invalid request") if errors else "Invalid request")

    async def unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, str(exc) or exc.__class__.__name__)

    app.add_exception_handler(StockNotFoundError, not_found)
    app.add_exception_handler(InvalidRequestError, invalid)
    app.add_exception_handler(RequestValidationError, validation)
    app.add_exception_handler(Exception, unexpected)
