"""
Domain entity for static symbol metadata.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass

INDEX_SECTOR = "Index"


@dataclass(frozen=True)
class CatalogEntry:
    symbol: str
    name: str
    sector: str
    base_price: float

    @property
    def is_index(self) -> bool:
        return self.sector == INDEX_SECTOR
