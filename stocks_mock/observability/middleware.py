from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog

from stocks_mock.observability.interceptor import CapturedResponse, ResponseInterceptor


def _header(scope: dict[str, Any], name: bytes) -> str:
    for key, value in scope.get("headers") or []:
        if key.lower() == name:
            return value.decode("latin-1")
    return ""


def resolve_client(scope: dict[str, Any]) -> str:
    forwarded_for = _header(scope, b"x-forwarded-for")
    if forwarded_for:
        return forwarded_for

    client = scope.get("client")
    if not client:
        return "-"
    host, port = client
    return f"{host}:{port}"


def request_target(scope: dict[str, Any]) -> str:
    raw_path = scope.get("raw_path")
    target = raw_path.decode("latin-1") if raw_path else scope.get("path", "")
    query = scope.get("query_string") or b""
    if query:
        target = f"{target}?{query.decode('latin-1')}"
    return target


def format_took(elapsed_ms: float) -> str:
    return f"{elapsed_ms:.3f}ms"


class RequestLoggingMiddleware:
    """Emits one access log line per HTTP request with the status the app actually sent."""

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        structlog.contextvars.bind_contextvars(request_id=str(uuid.uuid4()))

        start = perf_counter()
        interceptor = ResponseInterceptor(send, CapturedResponse())

        try:
            await self.app(scope, receive, interceptor)
        except Exception:
            # If nothing was sent, the outer error middleware answers 500.
            interceptor.captured.record(500)
            raise
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0

            structlog.get_logger("access").info(
                "http_request",
                client=resolve_client(scope),
                method=scope.get("method"),
                target=request_target(scope),
                protocol=f"HTTP/{scope.get('http_version', '1.1')}",
                status=str(interceptor.status_code),
                user_agent=_header(scope, b"user-agent"),
                took=format_took(elapsed_ms),
                elapsed_ms=round(elapsed_ms, 3),
            )

            structlog.contextvars.clear_contextvars()
