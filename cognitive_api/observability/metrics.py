from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Awaitable, Callable, Iterator

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Mount

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    labelnames=("endpoint", "method", "status"),
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=("endpoint", "method"),
    buckets=(0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)
lro_poll_attempts_total = Counter(
    "lro_poll_attempts_total",
    "Status checks issued against long-running remote operations",
    labelnames=("operation", "status"),
)
lro_duration_seconds = Histogram(
    "lro_duration_seconds",
    "Time from first status check to terminal outcome",
    labelnames=("operation", "outcome"),
    buckets=(0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 60.0, 120.0),
)
remote_call_duration_seconds = Histogram(
    "remote_call_duration_seconds",
    "Duration of individual calls to remote cognitive services",
    labelnames=("service",),
    buckets=(0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0),
)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _observe(request, "500", start)
            raise
        _observe(request, str(getattr(response, "status_code", 200)), start)
        return response


def _observe(request: Request, status: str, start: float) -> None:
    endpoint = _endpoint_label(request)
    method = request.method
    http_requests_total.labels(endpoint=endpoint, method=method, status=status).inc()
    http_request_duration_seconds.labels(endpoint=endpoint, method=method).observe(time.perf_counter() - start)


def _endpoint_label(request: Request) -> str:
    """Route template with its mount prefix, e.g. `/api/voices`.

    Depending on the FastAPI version the matched route's path may or may not
    carry the prefix the router was included with; the missing leading
    segments are taken from the request path.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if not isinstance(template, str) or not template:
        return request.url.path
    if isinstance(route, Mount):
        return template

    template_parts = [p for p in template.split("/") if p]
    path_parts = [p for p in request.url.path.split("/") if p]
    extra = len(path_parts) - len(template_parts)
    if extra <= 0:
        return template
    return "/" + "/".join(path_parts[:extra] + template_parts)


def record_poll_attempt(operation: str, status: str) -> None:
    lro_poll_attempts_total.labels(operation=operation, status=status).inc()


def record_lro_outcome(operation: str, outcome: str, seconds: float) -> None:
    lro_duration_seconds.labels(operation=operation, outcome=outcome).observe(seconds)


@contextmanager
def time_remote_call(service: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        remote_call_duration_seconds.labels(service=service).observe(time.perf_counter() - start)


# Router to expose /metrics
router = APIRouter(tags=["observability"])


@router.get("/metrics")
async def metrics_endpoint():
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
