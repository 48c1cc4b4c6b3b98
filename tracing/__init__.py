"""Tracing package providing LangSmith and OpenTelemetry integration."""

from .langsmith_setup import trace_llm_operation, tracer
from .opentelemetry_setup import get_tracer
from .opentelemetry_setup import setup_tracing as setup_otel_tracing

__all__ = [
    "tracer",
    "trace_llm_operation",
    "setup_otel_tracing",
    "get_tracer",
]
