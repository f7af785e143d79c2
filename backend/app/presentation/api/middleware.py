"""Request logging middleware — one log line per request with its timing."""

import time

from fastapi import FastAPI, Request

from app.infrastructure.logging.colored_logger import RequestLogger


def register_request_logging(app: FastAPI, *, colors: bool = True) -> None:
    """Log method, path, status and duration for every request."""
    request_log = RequestLogger("app.requests", colors=colors)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_log.failed(request.method, request.url.path, elapsed_ms, exc)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        request_log.completed(
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            client=request.client.host if request.client else "-",
        )
        return response
