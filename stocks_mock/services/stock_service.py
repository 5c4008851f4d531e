from __future__ import annotations

from urllib.parse import parse_qs

from stocks_mock.models.schemas import QuoteEntry, QuoteResponse, Stock
from stocks_mock.store.catalog import get_store


def extract_oid(body: str) -> str:
    """Return the first ``oid`` value of a form-encoded body, or ``""`` when absent."""

    values = parse_qs(body, keep_blank_values=True).get("oid")
    if not values:
        return ""
    return values[0]


def list_stocks() -> dict[str, Stock]:
    return get_store().as_dict()


def get_quote(oid: str) -> QuoteResponse | None:
    stock = get_store().lookup(oid)
    if stock is None:
        return None
    return QuoteResponse(data=[QuoteEntry(symbol=stock)])
