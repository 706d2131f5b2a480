"""FastAPI middleware that records Prometheus HTTP metrics."""
from __future__ import annotations

import time
from typing import Any, Callable, Iterable, MutableMapping, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from hello_service.metrics import http_request_duration_seconds, http_requests_total

UNMATCHED_ROUTE = "unmatched"


def _match_template(routes: Iterable[Any], scope: MutableMapping[str, Any]) -> Optional[str]:
    for route in routes:
        match, child_scope = route.matches(scope)
        if match != Match.FULL:
            continue
        path = getattr(route, "path", None)
        if path is not None:
            return path
        # Included routers match as a whole and carry no template of their own.
        nested = getattr(route, "routes", None)
        if nested:
            return _match_template(nested, {**scope, **child_scope})
        return None
    return None


def route_label(request: Request) -> str:
    """Return the path template of the route *request* matches.

    Requests that match no route share one label so that 404 traffic cannot
    grow the label set.
    """
    chosen = request.scope.get("route")
    path = getattr(chosen, "path", None)
    if path is not None and chosen.matches(request.scope)[0] == Match.FULL:
        return path
    return _match_template(request.app.router.routes, request.scope) or UNMATCHED_ROUTE


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware that records counter & histogram for each request."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]):  # type: ignore[override]
        start_time = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            status_code = response.status_code if response else 500
            route = route_label(request)

            http_requests_total.labels(
                method=request.method,
                route=route,
                status_code=status_code,
            ).inc()

            duration = time.perf_counter() - start_time
            http_request_duration_seconds.labels(
                method=request.method,
                route=route,
                status_code=status_code,
            ).observe(duration)
