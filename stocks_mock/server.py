from __future__ import annotations

import socket

import structlog
import uvicorn

from stocks_mock.config import Settings, get_settings
from stocks_mock.main import app
from stocks_mock.observability.logging import configure_logging


def build_config(settings: Settings, host: str, port: int) -> uvicorn.Config:
    # log_config=None keeps our handlers; the access line comes from RequestLoggingMiddleware.
    return uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,
        access_log=False,
        log_level=settings.log_level_value,
    )


def bind_listener(config: uvicorn.Config) -> socket.socket:
    """Bind the listening socket before the server starts; exits with status 1 if the port is unusable."""

    try:
        return config.bind_socket()
    except SystemExit as exc:
        structlog.get_logger("server").critical(
            "listener_bind_failed",
            host=config.host,
            port=config.port,
        )
        raise SystemExit(1) from exc


def serve(host: str | None = None, port: int | None = None) -> None:
    settings = get_settings()
    host = host or settings.host
    port = settings.port if port is None else port

    configure_logging(settings.log_level_value)

    config = build_config(settings, host, port)
    sock = bind_listener(config)

    structlog.get_logger("server").info("listening", host=host, port=port)
    uvicorn.Server(config).run(sockets=[sock])
