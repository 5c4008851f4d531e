"""Static quote catalog served by the mock API.

The records are fixture data: every entry shares the same placeholder
identity and price fields and differs only in ``oid`` and ``displayName``.
The store is built once at import time and never written afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from stocks_mock.models.schemas import Stock


_PLACEHOLDER_QUOTE: dict[str, Any] = {
    "shortName": "LVC",
    "fullName": "LIVECHAT SOFTWARE SPÓŁKA AKCYJNA",
    "o": 35.5,
    "c": 36.05,
    "min": 35.1,
    "max": 36.4,
    "v": 12049,
    "mc": 429201.3,
    "pc": 36.75,
    "tr": 92,
    "lop": 0,
    "ts": 1569837932,
    "mediumName": "LIVECHAT",
    "ut": "LIVECHAT",
    "ind": -1,
    "qp": "2",
}

# (oid, displayName)
_CATALOG: tuple[tuple[int, str], ...] = (
    (9537, "LVC (LIVECHAT)"),
    (221, "AMBRA"),
    (8789, "PKP Cargo"),
    (3972, "JSW"),
    (348, "CCC"),
    (29136, "Orlen"),
    (41, "PZU"),
    (308, "Oponeo"),
    (17347, "Kruk"),
    (66, "CDProject"),
    (3567, "11Bit"),
    (27169, "TenSquareGames"),
    (231, "Tauron"),
    (5730, "Platige Image"),
    (149, "Lena"),
    (9820, "PCC Rokita"),
)


class StockStore(Mapping[str, Stock]):
    """Read-only ``oid -> Stock`` mapping keyed by the decimal string of the oid."""

    def __init__(self, stocks: Mapping[str, Stock]) -> None:
        self._stocks = MappingProxyType(dict(stocks))

    def __getitem__(self, oid: str) -> Stock:
        return self._stocks[oid]

    def __iter__(self) -> Iterator[str]:
        return iter(self._stocks)

    def __len__(self) -> int:
        return len(self._stocks)

    def lookup(self, oid: str) -> Stock | None:
        return self._stocks.get(oid)

    def as_dict(self) -> dict[str, Stock]:
        return dict(self._stocks)


def build_store() -> StockStore:
    stocks = {
        str(oid): Stock.model_validate({**_PLACEHOLDER_QUOTE, "oid": oid, "displayName": display_name})
        for oid, display_name in _CATALOG
    }
    return StockStore(stocks)


@lru_cache(maxsize=1)
def get_store() -> StockStore:
    return build_store()
