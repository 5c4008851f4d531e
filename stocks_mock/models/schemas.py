from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Stock(BaseModel):
    """One quote record, serialized under the upstream quotes API field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    oid: int
    short_name: str = Field(alias="shortName")
    full_name: str = Field(alias="fullName")
    o: float
    c: float
    min: float
    max: float
    v: int
    mc: float
    pc: float
    tr: int
    lop: int
    ts: int
    medium_name: str = Field(alias="mediumName")
    display_name: str = Field(alias="displayName")
    ut: str
    ind: int
    qp: str


class QuoteEntry(BaseModel):
    symbol: Stock


class QuoteResponse(BaseModel):
    data: list[QuoteEntry]


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    http_status: int = Field(alias="httpStatus")
    error: str
