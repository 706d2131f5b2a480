"""FastAPI application serving the greeting and health check routes."""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_service import __version__
from hello_service.config import get_settings
from hello_service.metrics.system_metrics import run_sampler
from hello_service.middleware.metrics_middleware import MetricsMiddleware
from hello_service.routers import health as health_router

logger = logging.getLogger(__name__)

GREETING = "Hello World!"

_background_tasks: List[asyncio.Task] = []


# ---------------------------------------------------------------------------
# Startup / Shutdown
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    _background_tasks.append(
        asyncio.create_task(run_sampler(settings.cpu_sample_interval))
    )
    logger.debug("Background tasks started")

    yield

    for task in _background_tasks:
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
    _background_tasks.clear()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Hello Service",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Middleware & Routers
# ---------------------------------------------------------------------------
app.add_middleware(MetricsMiddleware)
app.include_router(health_router.router)


# ---------------------------------------------------------------------------
# Unmatched requests
# ---------------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def not_found_for_unmatched_methods(request: Request, exc: StarletteHTTPException):
    """Answer 404 for every unmatched method/path pair, including known paths."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Not Found"},
        )
    return await http_exception_handler(request, exc)


# ---------------------------------------------------------------------------
# Root endpoint
# ---------------------------------------------------------------------------
@app.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def root():
    return GREETING
