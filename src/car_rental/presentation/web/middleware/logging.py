"""HTTP request/response logging middleware for FastAPI."""

import logging
import time
from typing import Callable, Optional, Set

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from car_rental.infrastructure.logging import (
    clear_correlation_id,
    generate_correlation_id,
    get_logger,
    log_request,
    log_with_extra,
    set_correlation_id
)

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"

DEFAULT_EXCLUDED_PATHS = frozenset({
    '/health',
    '/docs',
    '/redoc',
    '/openapi.json',
    '/favicon.ico'
})


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Log HTTP requests and responses under a per-request correlation ID."""

    def __init__(self, app: ASGIApp, exclude_paths: Optional[Set[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths if exclude_paths is not None else set(DEFAULT_EXCLUDED_PATHS)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)

        client_host = request.client.host if request.client else 'unknown'
        log_request(
            logger,
            request.method,
            request.url.path,
            request_query=str(request.query_params) if request.query_params else None,
            client_host=client_host,
            content_type=request.headers.get('content-type')
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                extra={
                    "request_method": request.method,
                    "request_path": request.url.path,
                    "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error_type": type(exc).__name__
                },
                exc_info=True
            )
            clear_correlation_id()
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers[CORRELATION_ID_HEADER] = correlation_id

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        log_with_extra(
            logger,
            level,
            f"HTTP Response: {request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)",
            request_method=request.method,
            request_path=request.url.path,
            response_status=response.status_code,
            duration_ms=round(duration_ms, 2)
        )
        clear_correlation_id()

        return response
