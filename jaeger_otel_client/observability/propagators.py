"""Composite text-map propagator built from configuration."""

from typing import Iterable, Optional

from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.propagators.jaeger import JaegerPropagator
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from jaeger_otel_client.config import get_propagator_names

_PROPAGATORS = {
    "tracecontext": TraceContextTextMapPropagator,
    "baggage": W3CBaggagePropagator,
    "jaeger": JaegerPropagator,
}


def build_propagator(names: Optional[Iterable[str]] = None) -> CompositePropagator:
    """Build a composite propagator in the given order; W3C trace context is always included."""
    if names is None:
        names = get_propagator_names()

    ordered: list[str] = []
    for name in names:
        key = name.strip().lower()
        if key not in _PROPAGATORS:
            raise ValueError(f"Unsupported propagator: {name!r}")
        if key not in ordered:
            ordered.append(key)

    if "tracecontext" not in ordered:
        ordered.insert(0, "tracecontext")

    propagators: list[TextMapPropagator] = [_PROPAGATORS[key]() for key in ordered]
    return CompositePropagator(propagators)
