from __future__ import annotations

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stocks_mock.models.schemas import ErrorResponse


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"httpStatus": ..., "error": ...}`` and log them."""

    message = str(exc.detail)
    structlog.get_logger("api").error(
        "http_error",
        status_code=exc.status_code,
        error=message,
        path=request.url.path,
    )
    body = ErrorResponse(http_status=exc.status_code, error=message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True),
        headers=getattr(exc, "headers", None),
    )
