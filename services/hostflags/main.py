"""
Encrypted Host Flags Service

Fetches a video's embed page and returns the encryptedHostFlags token found
in its configuration as JSON.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from services.common.core.metrics import error_metrics, record_error

from .api.deps import ExtractionHandlerDep, RequestContextDep
from .config import config
from .core.logging_config import setup_logging
from .core.utils import utc_timestamp
from .exceptions import register_exception_handlers
from .lifecycle import manage_lifespan
from .middleware import request_context_middleware
from .models import ExtractionSuccess, GetHostFlagsRequest

# Logger setup
setup_logging()
logger = logging.getLogger("hostflags.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with manage_lifespan(app, config):
        yield


app = FastAPI(
    title="Encrypted Host Flags Service",
    version="1.0.0",
    lifespan=lifespan,
    root_path=config.root_path,
)

app.middleware("http")(request_context_middleware)
register_exception_handlers(app)


# ===========================================
# Endpoint definitions.
# ===========================================


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": utc_timestamp()}


@app.get("/metrics/errors")
async def error_metrics_snapshot():
    """Failure counts per error code since process start."""
    counts = error_metrics.snapshot()
    return {"errors": counts, "total": sum(counts.values())}


@app.post(
    "/encrypted-host-flags",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": GetHostFlagsRequest.model_json_schema()}},
        }
    },
)
async def get_encrypted_host_flags(ctx: RequestContextDep, handler: ExtractionHandlerDep):
    """
    Extract encryptedHostFlags from the embed page of ``video_id``.

    Responds 200 with the token, or 400 / 404 / 500 with an error envelope.
    """
    outcome = await handler.run(ctx)
    if not isinstance(outcome, ExtractionSuccess):
        record_error(outcome.code.value)
    return handler.render(outcome, ctx)


if __name__ == "__main__":
    import uvicorn

    host, _, port = config.UVICORN_BIND_ADDR.rpartition(":")
    uvicorn.run(app, host=host or "0.0.0.0", port=int(port))
