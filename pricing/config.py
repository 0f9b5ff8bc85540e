"""Dataclass-based checkout configuration.

Deployment settings live in one frozen dataclass with sensible defaults,
overridable from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _split_origins(value: str) -> tuple[str, ...]:
    return tuple(o.strip() for o in value.split(",") if o.strip())


@dataclass(frozen=True)
class CheckoutConfig:
    """Complete configuration for the checkout service.

    Usage::

        config = CheckoutConfig.from_env()
        setup_logging(config.log_level, config.log_file)
    """

    log_level: str = "INFO"
    log_file: Optional[str] = None
    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: ("http://localhost:3000", "http://localhost:3001")
    )
    debug: bool = False
    otel_endpoint: Optional[str] = None
    service_name: str = "checkout-pricing"

    @classmethod
    def default(cls) -> "CheckoutConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "CHECKOUT_") -> "CheckoutConfig":
        """Create config from environment variables.

        Example: CHECKOUT_LOG_LEVEL=DEBUG
        """
        overrides = {}

        log_level = os.getenv(f"{prefix}LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        log_file = os.getenv(f"{prefix}LOG_FILE")
        if log_file:
            overrides["log_file"] = log_file

        origins = os.getenv(f"{prefix}CORS_ORIGINS")
        if origins:
            overrides["cors_origins"] = _split_origins(origins)

        debug = os.getenv(f"{prefix}DEBUG")
        if debug:
            overrides["debug"] = debug.lower() == "true"

        endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
        if endpoint:
            overrides["otel_endpoint"] = endpoint

        return cls(**overrides)
