from __future__ import annotations

import argparse

from stocks_mock.config import get_settings
from stocks_mock.server import serve


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Mock quotes API serving a static stock catalog")
    parser.add_argument("--host", default=settings.host, help="Interface to listen on")
    parser.add_argument("--port", type=int, default=settings.port, help="HTTP port number")
    args = parser.parse_args()

    serve(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
