"""Carry a human-readable span name on the OpenTelemetry context.

Contexts are immutable: every helper returns a derived context and leaves its
input alone. An empty name means the override was cleared.
"""

from typing import Any, Optional

from opentelemetry import context as otel_context

_SPAN_NAME_KEY = otel_context.create_key("jaeger_otel_client.span_name")


def inject_span_name(ctx: Optional[otel_context.Context], name: str) -> otel_context.Context:
    return otel_context.set_value(_SPAN_NAME_KEY, name, ctx)


def uninject_span_name(ctx: Optional[otel_context.Context]) -> otel_context.Context:
    # injecting a blank span name is the same as clearing it
    return inject_span_name(ctx, "")


def span_name_from_context(ctx: Optional[otel_context.Context]) -> str:
    span_name = otel_context.get_value(_SPAN_NAME_KEY, ctx)
    if not isinstance(span_name, str):
        return ""
    return span_name


def span_name_formatter(operation: str, request: Any) -> str:
    """Name a request span.

    Uses the name injected into the context active while the request is
    handled, falling back to ``"<METHOD> <path>"``. ``request`` only needs
    ``method`` and ``url.path`` (a Starlette ``Request`` has both).
    """
    span_name = span_name_from_context(otel_context.get_current())
    if not span_name:
        span_name = f"{request.method} {request.url.path}"
    return span_name
