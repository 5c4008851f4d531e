from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol, runtime_checkable


Send = Callable[[dict[str, Any]], Awaitable[None]]


class HijackNotSupportedError(RuntimeError):
    """Raised when the wrapped ``send`` cannot hand over the raw connection."""


@runtime_checkable
class SupportsHijack(Protocol):
    """Optional capability of a server-provided ``send`` that can give up the transport."""

    def hijack(self) -> Any: ...


@dataclass
class CapturedResponse:
    status_code: int = 200
    recorded: bool = False

    def record(self, status_code: int) -> None:
        # First status wins; later ones are forwarded but not captured.
        if self.recorded:
            return
        self.status_code = status_code
        self.recorded = True


class ResponseInterceptor:
    """Wraps an ASGI ``send`` and records the first response status written through it.

    Every message is forwarded to the wrapped callable unchanged. Unknown
    attributes are looked up on the wrapped callable so server extensions
    attached to ``send`` stay reachable.
    """

    def __init__(self, send: Send, captured: CapturedResponse | None = None) -> None:
        self._send = send
        self.captured = captured if captured is not None else CapturedResponse()

    async def __call__(self, message: dict[str, Any]) -> None:
        if message.get("type") == "http.response.start":
            self.captured.record(int(message.get("status", 200)))
        await self._send(message)

    @property
    def status_code(self) -> int:
        return self.captured.status_code

    def hijack(self) -> Any:
        if not isinstance(self._send, SupportsHijack):
            raise HijackNotSupportedError(
                f"interceptor: wrapped send {type(self._send).__name__} does not support hijack"
            )
        return self._send.hijack()

    def __getattr__(self, name: str) -> Any:
        if name == "_send":
            raise AttributeError(name)
        return getattr(self._send, name)
