"""OpenTelemetry tracer lifecycle.

``initialize`` runs once at process start, before any request handling, and
installs a batching tracer provider as the global provider. When no collector
endpoint is configured it raises ``InvalidHostError`` and leaves the global
provider untouched, so every span created afterwards is silently discarded.
``shutdown`` runs once at process exit and flushes buffered spans, giving up
after a fixed timeout.

There is no locking around the global provider: a single writer at startup is
assumed.
"""

import logging
import threading
from typing import Callable, Mapping, Optional, Tuple

from opentelemetry import context as otel_context
from opentelemetry import propagate
from opentelemetry import trace as otel_trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.util.types import AttributeValue

from jaeger_otel_client.config import (
    RESOURCE_SCHEMA_URL,
    get_exporter_endpoint,
    get_shutdown_timeout,
)
from jaeger_otel_client.errors import (
    AlreadyInitializedError,
    InvalidHostError,
    InvalidServiceNameError,
    TracerShutdownError,
)
from jaeger_otel_client.observability.propagators import build_propagator

logger = logging.getLogger(__name__)

ExporterFactory = Callable[[str], SpanExporter]


def _default_exporter(endpoint: str) -> SpanExporter:
    return OTLPSpanExporter(endpoint=endpoint)


def _noop_shutdown() -> None:
    return None


class TracingLifecycle:
    """Owns the service name, the installed provider and the shutdown procedure."""

    def __init__(self):
        self.service_name: str = ""
        self.tracer_provider: Optional[TracerProvider] = None
        self._shutdown_func: Callable[[], None] = _noop_shutdown

    def is_enabled(self) -> bool:
        return self.tracer_provider is not None

    def initialize(
        self,
        service_name: str,
        attributes: Optional[Mapping[str, AttributeValue]] = None,
        *,
        endpoint: Optional[str] = None,
        exporter_factory: Optional[ExporterFactory] = None,
    ) -> None:
        """Install a tracer provider that exports to the collector at ``endpoint``.

        ``attributes`` are added to the resource after ``service.name``.
        ``endpoint`` defaults to the value discovered from the environment.
        """
        if not service_name:
            raise InvalidServiceNameError()
        if self.tracer_provider is not None:
            raise AlreadyInitializedError()

        if endpoint is None:
            endpoint = get_exporter_endpoint()
        if not endpoint:
            raise InvalidHostError()

        propagator = build_propagator()
        timeout = get_shutdown_timeout()
        exporter = (exporter_factory or _default_exporter)(endpoint)

        resource_attributes: dict = {SERVICE_NAME: service_name}
        resource_attributes.update(attributes or {})

        resource = Resource.create(resource_attributes, schema_url=RESOURCE_SCHEMA_URL)
        provider = TracerProvider(resource=resource)
        provider.add_span_processor(BatchSpanProcessor(exporter))
        otel_trace.set_tracer_provider(provider)

        # inter-service trace propagation
        propagate.set_global_textmap(propagator)

        self._shutdown_func = self._make_shutdown(provider, timeout)
        self.tracer_provider = provider
        self.service_name = service_name
        logger.info("Tracing initialized for %s, exporting to %s", service_name, endpoint)

    @staticmethod
    def _make_shutdown(provider: TracerProvider, timeout: float) -> Callable[[], None]:
        def _shutdown() -> None:
            outcome: dict = {}

            def _flush_and_close() -> None:
                try:
                    outcome["flushed"] = provider.force_flush(timeout_millis=int(timeout * 1000))
                    provider.shutdown()
                except Exception as exc:
                    outcome["error"] = exc

            # flush and close share one deadline
            worker = threading.Thread(
                target=_flush_and_close, name="tracer-provider-shutdown", daemon=True
            )
            worker.start()
            worker.join(timeout)

            if worker.is_alive():
                raise TracerShutdownError(
                    f"failed to cleanly shut down tracer provider: shutdown did not finish within {timeout:g}s"
                ) from TimeoutError(f"tracer provider still flushing after {timeout:g}s")
            if "error" in outcome:
                raise TracerShutdownError() from outcome["error"]
            if not outcome["flushed"]:
                raise TracerShutdownError(
                    f"failed to cleanly shut down tracer provider: flush did not finish within {timeout:g}s"
                )

        return _shutdown

    def shutdown(self) -> None:
        """Flush and close the installed provider. Call once, at process exit."""
        self._shutdown_func()

    def trace(self) -> otel_trace.Tracer:
        return otel_trace.get_tracer_provider().get_tracer(self.service_name)

    def span_from_context(
        self, ctx: Optional[otel_context.Context], name: str
    ) -> Tuple[otel_context.Context, otel_trace.Span]:
        """Start ``name`` as a child of ``ctx``; the caller ends the span."""
        span = self.trace().start_span(name, context=ctx)
        return otel_trace.set_span_in_context(span, ctx), span


# process-wide instance
tracing = TracingLifecycle()


def initialize(
    service_name: str,
    attributes: Optional[Mapping[str, AttributeValue]] = None,
    *,
    endpoint: Optional[str] = None,
    exporter_factory: Optional[ExporterFactory] = None,
) -> None:
    tracing.initialize(
        service_name, attributes, endpoint=endpoint, exporter_factory=exporter_factory
    )


def shutdown() -> None:
    tracing.shutdown()


def trace() -> otel_trace.Tracer:
    return tracing.trace()


def span_from_context(
    ctx: Optional[otel_context.Context], name: str
) -> Tuple[otel_context.Context, otel_trace.Span]:
    return tracing.span_from_context(ctx, name)


def is_enabled() -> bool:
    return tracing.is_enabled()
