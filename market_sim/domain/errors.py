"""
Domain exceptions.
Entrypoints translate these into HTTP responses; nothing below the
entrypoint layer knows about status codes.
"""


class MarketDataError(Exception):
    """Base class for every error raised by the market data core."""


class StockNotFoundError(MarketDataError):
    def __init__(self, message: str = "Stock not found") -> None:
        super().__init__(message)


class InvalidRequestError(MarketDataError, ValueError):
    """The caller supplied a malformed request (e.g. a batch without a symbols list)."""


class UpstreamError(MarketDataError):
    """The third-party quote provider failed or returned an unexpected shape."""
