"""Shamba API: FastAPI application serving ward recommendations.

Run:
    uvicorn shamba.api.main:app --reload
    # or
    shamba-api
"""

import logging
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from shamba.api.routes import router
from shamba.config import settings
from shamba.ingestion.catalog import load_catalog
from shamba.observability.logging import correlation_id, setup_logging
from shamba.observability.tracing import init_tracing

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog on startup; the API runs degraded if it can't."""
    setup_logging(json_format=settings.log_json, level=settings.log_level)
    init_tracing(settings)

    app.state.settings = settings
    try:
        app.state.catalog = load_catalog(settings.data_dir)
    except Exception as e:
        logger.error("Catalog load failed: %s; API will start in degraded mode", e)
        app.state.catalog = None
    logger.info("Shamba API ready")
    yield
    logger.info("Shutting down")


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Set correlation ID from X-Request-ID header or generate a new one."""

    async def dispatch(self, request: Request, call_next):
        cid = request.headers.get("x-request-id", str(uuid.uuid4()))
        token = correlation_id.set(cid)
        try:
            response = await call_next(request)
            response.headers["x-request-id"] = cid
            return response
        finally:
            correlation_id.reset(token)


app = FastAPI(
    title="Shamba",
    description="Crop, livestock and pasture recommendations for Kenyan wards "
    "from climate ranges and agro-ecological zones.",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.settings = settings
app.state.catalog = None

app.add_middleware(CorrelationIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health(request: Request):
    """Health check: reports whether the catalog is loaded and its sizes."""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        return {"status": "degraded", "checks": {"catalog": "not_loaded"}}
    return {"status": "healthy", "checks": {"catalog": "ok", **catalog.sizes()}}


def run() -> None:
    """Entry point for the shamba-api console script."""
    uvicorn.run("shamba.api.main:app", host="0.0.0.0", port=8000)
