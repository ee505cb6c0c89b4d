"""
Prometheus metrics for pagination building and the HTTP layer.

Defines the pagination counters and a ``setup_metrics`` function that wires
request tracking and a ``/metrics`` route into a FastAPI application.
"""

from __future__ import annotations

import time

from fastapi import FastAPI, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response as StarletteResponse

link_sets_built_total = Counter(
    "pagination_link_sets_total",
    "Total number of link sets built",
    labelnames=["style"],
    registry=REGISTRY,
)

invalid_arguments_total = Counter(
    "pagination_invalid_arguments_total",
    "Total number of rejected pagination arguments",
    labelnames=["argument"],
    registry=REGISTRY,
)

api_requests_total = Counter(
    "pagination_api_requests_total",
    "Total number of API requests",
    labelnames=["method", "endpoint", "status"],
    registry=REGISTRY,
)

api_request_duration_seconds = Histogram(
    "pagination_api_request_duration_seconds",
    "Request latency in seconds",
    labelnames=["method", "endpoint"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
    registry=REGISTRY,
)


class PrometheusPaginationMetrics:
    """Records pagination events on the module-level counters."""

    def record_link_set(self, style: str) -> None:
        link_sets_built_total.labels(style=style).inc()

    def record_rejection(self, argument: str) -> None:
        invalid_arguments_total.labels(argument=argument).inc()


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware that records request count and latency per endpoint."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        method = request.method
        start = time.perf_counter()
        response: Response = await call_next(request)
        duration = time.perf_counter() - start

        # The route is resolved only after the call, keeping label cardinality bounded.
        endpoint = self._get_path_template(request)

        api_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status=str(response.status_code),
        ).inc()
        api_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

        return response

    @staticmethod
    def _get_path_template(request: Request) -> str:
        route = request.scope.get("route")
        if route and hasattr(route, "path"):
            return route.path
        return request.url.path


def setup_metrics(app: FastAPI) -> None:
    """
    Instrument a FastAPI application with Prometheus metrics.

    * Adds the ``PrometheusMiddleware`` for automatic request tracking.
    * Registers a ``/metrics`` endpoint that serves the Prometheus
      exposition format.
    """

    app.add_middleware(PrometheusMiddleware)

    @app.get("/metrics", include_in_schema=False)
    async def metrics_endpoint() -> StarletteResponse:
        return StarletteResponse(
            content=generate_latest(REGISTRY),
            media_type=CONTENT_TYPE_LATEST,
        )
