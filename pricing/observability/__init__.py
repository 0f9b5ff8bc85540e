"""Logging and tracing setup."""

from pricing.observability.logging_setup import get_logger, setup_logging
from pricing.observability.otel_setup import setup_otel

__all__ = ["get_logger", "setup_logging", "setup_otel"]
