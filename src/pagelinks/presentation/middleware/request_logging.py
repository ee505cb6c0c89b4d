"""
Structured JSON request logging middleware.

Every request/response cycle is logged as a single structured event
containing method, path, query, status code, duration and a unique
request id.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger: structlog.stdlib.BoundLogger = structlog.get_logger("pagelinks.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request/response with structured fields.

    Captured fields:
        - ``request_id``  -- unique UUID for the request
        - ``method``      -- HTTP method
        - ``path``        -- request path
        - ``query``       -- raw query string, if any
        - ``status_code`` -- response status
        - ``duration_ms`` -- wall-clock duration in milliseconds
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            self._log_request(
                request=request,
                request_id=request_id,
                status_code=500,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                level="error",
            )
            raise

        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers["X-Request-ID"] = request_id

        level = "info"
        if response.status_code >= 500:
            level = "error"
        elif response.status_code >= 400:
            level = "warning"

        self._log_request(
            request=request,
            request_id=request_id,
            status_code=response.status_code,
            duration_ms=duration_ms,
            level=level,
        )
        return response

    @staticmethod
    def _log_request(
        *,
        request: Request,
        request_id: str,
        status_code: int,
        duration_ms: float,
        level: str = "info",
    ) -> None:
        event_data: dict[str, Any] = {
            "request_id": request_id,
            "method": request.method,
            "path": str(request.url.path),
            "query": str(request.url.query) if request.url.query else None,
            "status_code": status_code,
            "duration_ms": duration_ms,
        }

        log_method = getattr(logger, level, logger.info)
        log_method("http_request", **event_data)
