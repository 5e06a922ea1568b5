import pytest
from opentelemetry import propagate
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult
from opentelemetry.test.globals_test import reset_trace_globals

from jaeger_otel_client.observability import otel_tracing

TRACING_ENV = (
    "OTEL_EXPORTER_JAEGER_AGENT_HOST",
    "OTEL_EXPORTER_JAEGER_AGENT_PORT",
    "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT",
    "TRACING_PROPAGATORS",
    "TRACING_SHUTDOWN_TIMEOUT",
)


class RecordingExporter(SpanExporter):
    """Fake collector: keeps exported spans and counts lifecycle calls."""

    def __init__(self):
        self.spans = []
        self.shutdown_calls = 0

    def export(self, spans):
        self.spans.extend(spans)
        return SpanExportResult.SUCCESS

    def shutdown(self):
        self.shutdown_calls += 1

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True


@pytest.fixture(autouse=True)
def fresh_tracing(monkeypatch):
    """Each test starts with no collector configured and default OTel globals."""
    for var in TRACING_ENV:
        monkeypatch.delenv(var, raising=False)

    textmap = propagate.get_global_textmap()
    reset_trace_globals()
    lifecycle = otel_tracing.TracingLifecycle()
    monkeypatch.setattr(otel_tracing, "tracing", lifecycle)

    yield lifecycle

    reset_trace_globals()
    propagate.set_global_textmap(textmap)


@pytest.fixture
def exporter():
    return RecordingExporter()


@pytest.fixture
def initialized(exporter):
    """Tracing initialized against the recording exporter."""
    otel_tracing.initialize(
        "orders",
        endpoint="http://collector:4318/v1/traces",
        exporter_factory=lambda endpoint: exporter,
    )
    return exporter
