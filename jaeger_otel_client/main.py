"""FastAPI entrypoint with tracing initialized in the lifespan."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from jaeger_otel_client.config import ENABLE_OTEL, SERVICE_NAME
from jaeger_otel_client.errors import InvalidHostError, TracerShutdownError
from jaeger_otel_client.middleware import TracingMiddleware
from jaeger_otel_client.observability.otel_tracing import initialize, is_enabled, shutdown
from jaeger_otel_client.utils.logger import configure_logging, log_error, log_info, log_warning

configure_logging(logging.INFO)
logger = logging.getLogger(__name__)

# ─────────────────── lifespan context manager ──────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize tracing on startup; flush spans on shutdown."""
    if ENABLE_OTEL:
        try:
            initialize(SERVICE_NAME)
        except InvalidHostError as exc:
            # no collector: keep serving with no-op tracing
            log_warning("Tracing disabled: %s", exc)
    log_info("Tracing enabled: %s", is_enabled())

    try:
        yield
    finally:
        try:
            shutdown()
        except TracerShutdownError as exc:
            log_error("Tracer shutdown failed: %s", exc)
        logger.info("Service shut down.")


# ───────────────────────── FastAPI app ─────────────────────

app = FastAPI(title="Jaeger OTel Client", description="Tracing demo service", lifespan=lifespan)
app.add_middleware(TracingMiddleware)


@app.get("/")
async def root():
    return {"service": SERVICE_NAME, "tracing": is_enabled()}


@app.get("/health")
async def health():
    return {"status": "ok"}


# ─────────────────────────── run uvicorn ────────────────────
if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
