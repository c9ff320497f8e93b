"""Observability helpers: structured logging."""

from search_server.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
]
