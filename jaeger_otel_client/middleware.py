# jaeger_otel_client/middleware.py
"""ASGI middleware opening one server span per request."""

from typing import Any, Dict, Tuple

from opentelemetry.instrumentation.asgi import OpenTelemetryMiddleware, get_default_span_details
from starlette.requests import Request
from starlette.types import ASGIApp

from jaeger_otel_client.observability.span_name import span_name_formatter

SERVER_OPERATION = "http.server"


def server_span_details(scope: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    if scope.get("type") != "http":
        return get_default_span_details(scope)
    return span_name_formatter(SERVER_OPERATION, Request(scope)), {}


class TracingMiddleware(OpenTelemetryMiddleware):
    """Names each request span with ``span_name_formatter``.

    A name injected into the context by an outer middleware wins over the
    default ``"<METHOD> <path>"``. Trace context from the inbound headers
    becomes the parent of the span; 5xx responses and exceptions mark it
    as an error.
    """

    def __init__(self, app: ASGIApp, **kwargs):
        kwargs.setdefault("default_span_details", server_span_details)
        super().__init__(app, **kwargs)
