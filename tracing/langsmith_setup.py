"""LangSmith tracing setup and custom instrumentation."""

import os
from contextlib import contextmanager, nullcontext
from typing import Any, Dict, Optional

from langsmith import Client
from langsmith.run_helpers import tracing_context

from infrastructure.logging import get_logger

from .opentelemetry_setup import get_tracer

logger = get_logger(__name__)


class LangSmithTracer:
    """Custom LangSmith tracer for the Text-to-SQL assistant."""

    def __init__(self):
        """Initialize LangSmith tracing."""
        self.client: Optional[Client] = None
        self.enabled = False
        self.setup_tracing()

    def setup_tracing(self) -> None:
        """Setup LangSmith tracing configuration."""
        api_key = os.getenv("LANGCHAIN_API_KEY")
        project = os.getenv("LANGCHAIN_PROJECT", "text-to-sql")
        endpoint = os.getenv("LANGCHAIN_ENDPOINT", "https://api.smith.langchain.com")
        enable = os.getenv("LANGCHAIN_TRACING_V2", "true").lower() == "true"

        if not (enable and api_key):
            logger.info("LangSmith tracing disabled (missing API key or disabled in env)")
            return

        os.environ["LANGCHAIN_TRACING_V2"] = "true"
        os.environ["LANGCHAIN_PROJECT"] = project
        os.environ["LANGCHAIN_ENDPOINT"] = endpoint

        self.client = Client(api_url=endpoint, api_key=api_key)
        self.enabled = True
        logger.info(f"LangSmith tracing enabled for project: {project}")

    @contextmanager
    def trace_operation(self, name: str, operation_type: str = "custom", **metadata):
        """Context manager for tracing custom operations."""
        otel_tracer = get_tracer()
        span_ctx = (
            otel_tracer.start_as_current_span(name) if otel_tracer else nullcontext()
        )

        with span_ctx as span:
            if span is not None:
                span.set_attribute("operation_type", operation_type)
                for key, value in metadata.items():
                    span.set_attribute(key, value)

            if not self.enabled:
                yield
                return

            with tracing_context(
                metadata={"operation_type": operation_type, "name": name, **metadata},
            ):
                yield

    def trace_llm_call(self, name: str, model: str, **metadata):
        """
        Context manager for tracing LLM calls with specific metadata.

        Args:
            name: Name of the LLM operation
            model: Model being used
            **metadata: Additional metadata (never the API key)
        """
        return self.trace_operation(
            name=name, operation_type="llm", model=model, **metadata
        )

    def log_metrics(self, metrics: Dict[str, Any]) -> None:
        """Log metrics for the current trace."""
        for key, value in metrics.items():
            logger.debug(f"Trace metric - {key}: {value}")


# Global tracer instance
tracer = LangSmithTracer()


def trace_llm_operation(name: str, model: str = "gemini", **metadata):
    """Shorthand for tracing LLM operations."""
    return tracer.trace_llm_call(name=name, model=model, **metadata)
