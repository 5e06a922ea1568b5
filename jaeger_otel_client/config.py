import os

# Feature toggles
ENABLE_OTEL: bool = os.getenv("ENABLE_OTEL", "true").lower() == "true"

# Demo service identity
SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "jaeger-otel-client")

# Collector defaults (OTLP over HTTP)
DEFAULT_AGENT_PORT = "4318"
DEFAULT_TRACES_PATH = "/v1/traces"
DEFAULT_PROPAGATORS = "tracecontext"
DEFAULT_SHUTDOWN_TIMEOUT = 5.0

# semantic conventions version stamped on the service resource
RESOURCE_SCHEMA_URL = "https://opentelemetry.io/schemas/1.7.0"


def get_agent_host() -> str:
    return os.getenv("OTEL_EXPORTER_JAEGER_AGENT_HOST", "").strip()


def get_exporter_endpoint() -> str:
    """Collector endpoint discovered from the environment, or "" when unset.

    A full ``OTEL_EXPORTER_OTLP_TRACES_ENDPOINT`` wins over the agent host/port pair.
    """
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT", "").strip()
    if endpoint:
        return endpoint

    host = get_agent_host()
    if not host:
        return ""
    port = os.getenv("OTEL_EXPORTER_JAEGER_AGENT_PORT", DEFAULT_AGENT_PORT).strip() or DEFAULT_AGENT_PORT
    return f"http://{host}:{port}{DEFAULT_TRACES_PATH}"


def get_propagator_names() -> list[str]:
    raw = os.getenv("TRACING_PROPAGATORS", DEFAULT_PROPAGATORS)
    return [name.strip().lower() for name in raw.split(",") if name.strip()]


def get_shutdown_timeout() -> float:
    raw = os.getenv("TRACING_SHUTDOWN_TIMEOUT")
    if not raw:
        return DEFAULT_SHUTDOWN_TIMEOUT
    return float(raw)
