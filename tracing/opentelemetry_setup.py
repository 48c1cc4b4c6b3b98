"""OpenTelemetry tracing setup for the Text-to-SQL assistant."""

from __future__ import annotations

import os
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - only for type hints
    from opentelemetry import trace as trace_mod


# Global tracer instance used across the application
otel_tracer: Optional["trace_mod.Tracer"] = None


def setup_tracing(service_name: str = "text-to-sql") -> Optional["trace_mod.Tracer"]:
    """Configure OpenTelemetry tracing with an OTLP/HTTP exporter.

    Spans are only exported when ``OTEL_EXPORTER_OTLP_ENDPOINT`` is set;
    otherwise the function returns ``None`` and no spans are created.
    """

    global otel_tracer

    otlp_endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if not otlp_endpoint:
        otel_tracer = None
        return None

    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
        OTLPSpanExporter,
    )
    from opentelemetry.sdk.resources import SERVICE_NAME, Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    resource = Resource(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    exporter = OTLPSpanExporter(endpoint=f"{otlp_endpoint.rstrip('/')}/v1/traces")
    provider.add_span_processor(BatchSpanProcessor(exporter))

    otel_tracer = trace.get_tracer(service_name)
    return otel_tracer


def get_tracer() -> Optional["trace_mod.Tracer"]:
    """Return the tracer configured by :func:`setup_tracing`, if any."""
    return otel_tracer


__all__ = ["setup_tracing", "get_tracer", "otel_tracer"]
