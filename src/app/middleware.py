"""Middleware de logging: registra cada petición, su código de respuesta y la latencia."""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.logger import get_logger

_logger = get_logger("http")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log de peticiones entrantes y su resultado."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        _logger.debug("request %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            _logger.exception("error handling %s %s", request.method, request.url.path)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        _logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
