"""Symbol normalisation and history range handling shared by both data sources."""

DEFAULT_SUFFIX = ".NS"
INDEX_PREFIX = "^"

HISTORY_RANGE_DAYS: dict[str, int] = {
    "1d": 1,
    "5d": 5,
    "1mo": 30,
    "3mo": 90,
    "6mo": 180,
    "1y": 365,
}
DEFAULT_RANGE = "1y"
DAY_MS = 24 * 60 * 60 * 1000


def resolve_symbol(raw: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Uppercase *raw* and append the exchange suffix unless it already has
    one or names an index (``^NSEI``)."""
    symbol = raw.strip().upper()
    if "." in symbol or symbol.startswith(INDEX_PREFIX):
        return symbol
    return f"{symbol}{suffix}"


def symbol_candidates(raw: str, suffix: str = DEFAULT_SUFFIX) -> list[str]:
    """Keys to try, most specific first: the resolved symbol, then the bare one."""
    bare = raw.strip().upper()
    resolved = resolve_symbol(raw, suffix)
    return [resolved] if resolved == bare else [resolved, bare]


def range_days(range_key: str) -> int:
    return HISTORY_RANGE_DAYS.get(range_key, HISTORY_RANGE_DAYS[DEFAULT_RANGE])
