"""
JSON presenters: domain entities -> camelCase dicts for HTTP responses.

change and changePercent are held at full precision in the domain and only
rounded here.
"""

from typing import Any, Optional, Union

from market_sim.domain.entities.catalog_entry import CatalogEntry
from market_sim.domain.entities.market_status import MarketStatus
from market_sim.domain.entities.market_summary import MarketOverview, SectorPerformance
from market_sim.domain.entities.quote import HistoryCandle, OrderBook, Quote
from market_sim.domain.entities.simulation_settings import SimulationSettings


def quote_to_dict(quote: Optional[Quote]) -> Optional[dict[str, Any]]:
    if quote is None:
        return None
    return {
        "symbol": quote.symbol,
        "name": quote.name,
        "sector": quote.sector,
        "price": quote.price,
        "previousClose": quote.previous_close,
        "open": quote.open,
        "high": quote.high,
        "low": quote.low,
        "volume": quote.volume,
        "change": round(quote.change, 2),
        "changePercent": round(quote.change_percent, 2),
        "bid": quote.bid,
        "ask": quote.ask,
        "bidSize": quote.bid_size,
        "askSize": quote.ask_size,
        "lastUpdated": quote.last_updated,
    }


def quotes_to_list(quotes: list[Quote]) -> list[dict[str, Any]]:
    return [quote_to_dict(q) for q in quotes]


def search_result_to_dict(item: Union[Quote, CatalogEntry]) -> dict[str, Any]:
    """Full quote for simulated matches; symbol/name/sector for catalog matches."""
    if isinstance(item, Quote):
        return quote_to_dict(item)
    return {"symbol": item.symbol, "name": item.name, "sector": item.sector}


def candle_to_dict(candle: HistoryCandle) -> dict[str, Any]:
    return {
        "date": candle.date,
        "timestamp": candle.timestamp,
        "open": candle.open,
        "high": candle.high,
        "low": candle.low,
        "close": candle.close,
        "volume": candle.volume,
    }


def status_to_dict(status: MarketStatus) -> dict[str, Any]:
    data: dict[str, Any] = {"isOpen": status.is_open, "reason": status.reason}
    if status.session is not None:
        data["session"] = status.session
    if status.next_open is not None:
        data["nextOpen"] = status.next_open
    if status.is_simulated:
        data["isSimulated"] = True
    if status.pre_market:
        data["preMarket"] = True
    if status.post_market:
        data["postMarket"] = True
    if status.speed is not None:
        data["speed"] = status.speed
    return data


def order_book_to_dict(book: OrderBook) -> dict[str, Any]:
    def levels(side):
        return [{"price": l.price, "quantity": l.quantity, "orders": l.orders} for l in side]

    return {
        "symbol": book.symbol,
        "lastPrice": book.last_price,
        "bids": levels(book.bids),
        "asks": levels(book.asks),
        "totalBidQty": book.total_bid_qty,
        "totalAskQty": book.total_ask_qty,
    }


def settings_to_dict(settings: SimulationSettings) -> dict[str, Any]:
    return {
        "speed": settings.speed,
        "volatilityMultiplier": settings.volatility_multiplier,
        "updateInterval": settings.update_interval,
        "alwaysOpen": settings.always_open,
        "priceTickSize": settings.price_tick_size,
        "maxTickMultiplier": settings.max_tick_multiplier,
    }


def sector_to_dict(sector: SectorPerformance) -> dict[str, Any]:
    return {
        "name": sector.name,
        "avgChange": sector.avg_change,
        "stockCount": sector.stock_count,
        "topStock": sector.top_stock,
    }


def overview_to_dict(overview: MarketOverview) -> dict[str, Any]:
    breadth = overview.breadth
    return {
        "indices": quotes_to_list(overview.indices),
        "marketBreadth": {
            "advancing": breadth.advancing,
            "declining": breadth.declining,
            "unchanged": breadth.unchanged,
            "total": breadth.total,
        },
        "totalVolume": overview.total_volume,
        "topGainer": quote_to_dict(overview.top_gainer),
        "topLoser": quote_to_dict(overview.top_loser),
        "lastUpdated": overview.last_updated,
        "marketStatus": status_to_dict(overview.market_status),
    }
