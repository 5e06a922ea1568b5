# jaeger_otel_client/errors.py


class TracingError(Exception):
    """Base class for tracing lifecycle errors."""


class InvalidHostError(TracingError):
    """No collector endpoint is configured; tracing stays in no-op mode."""

    def __init__(self, message: str = "jaeger: invalid agent host"):
        super().__init__(message)


class InvalidServiceNameError(TracingError, ValueError):
    def __init__(self, message: str = "jaeger: invalid service name"):
        super().__init__(message)


class TracerShutdownError(TracingError):
    def __init__(self, message: str = "failed to cleanly shut down tracer provider"):
        super().__init__(message)


class AlreadyInitializedError(TracingError):
    """A tracer provider is already installed by this lifecycle."""

    def __init__(self, message: str = "jaeger: tracing already initialized"):
        super().__init__(message)
