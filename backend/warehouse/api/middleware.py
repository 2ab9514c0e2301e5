"""Request Logging — one structured log line per HTTP request.

Invariants:
    - Every request is logged with method, path, status code and duration
    - Logging never alters the response

Design Decisions:
    - Plain @app.middleware("http") function over a BaseHTTPMiddleware subclass:
      nothing to configure, nothing to hold
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def register_request_logging(app: FastAPI) -> None:
    """Attach the request logger to the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
