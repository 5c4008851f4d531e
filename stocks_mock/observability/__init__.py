"""Access logging for the mock API.

structlog for JSON log lines, plus a pure ASGI middleware that records the
response status through a wrapped ``send`` and logs one line per request.
"""
