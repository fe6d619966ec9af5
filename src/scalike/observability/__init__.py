"""Observability – structured logging helpers."""
from scalike.observability.logging import configure_logging, get_logger, tracing_enabled

__all__ = ["configure_logging", "get_logger", "tracing_enabled"]
