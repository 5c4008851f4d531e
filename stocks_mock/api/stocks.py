from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from starlette.requests import ClientDisconnect

from stocks_mock.models.schemas import QuoteResponse, Stock
from stocks_mock.services.stock_service import extract_oid, get_quote, list_stocks

router = APIRouter(tags=["stocks"])


@router.get("/stocks", response_model=dict[str, Stock])
async def get_all_stocks() -> dict[str, Stock]:
    return list_stocks()


@router.post("/stocks", response_model=QuoteResponse)
async def get_stock_quote(request: Request) -> QuoteResponse:
    # Raw body on purpose: clients post form-encoded text without always setting Content-Type.
    try:
        body = (await request.body()).decode("utf-8")
    except (ClientDisconnect, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=400, detail="can't read request body") from exc

    oid = extract_oid(body)
    quote = get_quote(oid)
    if quote is None:
        raise HTTPException(status_code=404, detail=f"can't find stock with oid: {oid}")
    return quote
