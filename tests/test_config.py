import pytest

from jaeger_otel_client import config


def test_no_endpoint_when_unconfigured():
    assert config.get_exporter_endpoint() == ""


def test_endpoint_built_from_agent_host(monkeypatch):
    monkeypatch.setenv("OTEL_EXPORTER_JAEGER_AGENT_HOST", "jaeger")
    assert config.get_exporter_endpoint() == "http://jaeger:4318/v1/traces"


def test_agent_port_override(monkeypatch):
    monkeypatch.setenv("OTEL_EXPORTER_JAEGER_AGENT_HOST", "jaeger")
    monkeypatch.setenv("OTEL_EXPORTER_JAEGER_AGENT_PORT", "14318")
    assert config.get_exporter_endpoint() == "http://jaeger:14318/v1/traces"


def test_blank_host_is_unconfigured(monkeypatch):
    monkeypatch.setenv("OTEL_EXPORTER_JAEGER_AGENT_HOST", "   ")
    assert config.get_exporter_endpoint() == ""


def test_full_endpoint_wins(monkeypatch):
    monkeypatch.setenv("OTEL_EXPORTER_JAEGER_AGENT_HOST", "jaeger")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT", "https://otel.example.com/v1/traces")
    assert config.get_exporter_endpoint() == "https://otel.example.com/v1/traces"


def test_propagator_names(monkeypatch):
    assert config.get_propagator_names() == ["tracecontext"]
    monkeypatch.setenv("TRACING_PROPAGATORS", "TraceContext, jaeger,,")
    assert config.get_propagator_names() == ["tracecontext", "jaeger"]


def test_shutdown_timeout(monkeypatch):
    assert config.get_shutdown_timeout() == 5.0
    monkeypatch.setenv("TRACING_SHUTDOWN_TIMEOUT", "2.5")
    assert config.get_shutdown_timeout() == 2.5


def test_shutdown_timeout_must_be_numeric(monkeypatch):
    monkeypatch.setenv("TRACING_SHUTDOWN_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        config.get_shutdown_timeout()
