"""Per-sector volatility coefficients used by the price walk and history synthesis."""

from typing import Optional

DEFAULT_VOLATILITY = 0.02

SECTOR_VOLATILITY: dict[str, float] = {
    "IT": 0.025,
    "Banking": 0.02,
    "Pharma": 0.022,
    "Automobile": 0.023,
    "Oil & Gas": 0.025,
    "FMCG": 0.015,
    "Steel": 0.03,
    "Finance": 0.028,
    "Telecom": 0.018,
    "Power": 0.016,
    "Cement": 0.02,
    "Construction": 0.022,
    "Conglomerate": 0.035,
    "Infrastructure": 0.025,
    "Food Tech": 0.04,
    "Fintech": 0.045,
    "E-Commerce": 0.04,
    "Retail": 0.025,
    "Consumer Goods": 0.018,
    "Paints": 0.017,
}


def volatility_of(sector: Optional[str]) -> float:
    return SECTOR_VOLATILITY.get(sector or "", DEFAULT_VOLATILITY)
