from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from stocks_mock import __version__
from stocks_mock.api.errors import http_exception_handler
from stocks_mock.api.stocks import router as stocks_router
from stocks_mock.config import get_settings
from stocks_mock.observability.logging import configure_logging
from stocks_mock.observability.middleware import RequestLoggingMiddleware
from stocks_mock.store.catalog import get_store


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level_value)
    # Build the catalog before the first request arrives.
    get_store()

    app = FastAPI(title="Stocks Mock API", version=__version__)
    app.include_router(stocks_router)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "HEAD"],
        allow_headers=["Accept", "Content-Type", "Origin", "X-Requested-With"],
    )
    # Added last so it wraps CORS and logs preflight responses too.
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
