"""
OpenTelemetry setup for checkout pricing.

Each discount computation runs in a ``checkout.discount`` span. Without a
configured provider the API's no-op tracer is used, so the engine never
depends on tracing being set up.
"""
from __future__ import annotations
from typing import Optional
import os

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor


def setup_otel(
    service_name: str = "checkout-pricing",
    endpoint: Optional[str] = None,
):
    """Install an SDK tracer provider, exporting over OTLP when an endpoint is set."""
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    otlp_endpoint = endpoint or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if otlp_endpoint:
        # Needs the "otlp" extra.
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    return trace.get_tracer(service_name)


def get_tracer(name: str):
    """Tracer from whichever provider is current (no-op until setup_otel runs)."""
    return trace.get_tracer(name)
