"""Utility for creating spans easily."""

import contextlib

from jaeger_otel_client.observability.otel_tracing import trace


@contextlib.asynccontextmanager
async def traced_span(name: str, **attrs):
    """Async context manager that runs its body inside a span.

    The span is a no-op when tracing was never initialized.
    """
    tracer = trace()
    with tracer.start_as_current_span(name) as span:
        for k, v in attrs.items():
            span.set_attribute(k, v)
        yield span
