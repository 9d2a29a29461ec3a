"""Middleware module for the car rental web app."""

from .logging import CORRELATION_ID_HEADER, RequestResponseLoggingMiddleware

__all__ = [
    "CORRELATION_ID_HEADER",
    "RequestResponseLoggingMiddleware"
]
