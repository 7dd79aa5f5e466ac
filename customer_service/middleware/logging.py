"""
Customer Service — Access Log Middleware
==========================================

What:  One `customer_service.access` line per request.
How:   The line names the matched route template rather than the raw URL, so
       `GET /api/customers/65a4...` is logged as
       `GET /api/customers/{customer_id}` and customer ids stay out of the
       access log. Photo uploads also log the declared upload size.

Log level by outcome:
    5xx → ERROR, 4xx → WARNING (includes the empty 404 for unknown customers),
    anything else → INFO. /health is not logged.

Request bodies (names, ages, salaries) and photo bytes are never logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from customer_service.middleware.request_id import request_id_var

logger = logging.getLogger("customer_service.access")

_UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def route_template(request: Request) -> str:
    """Path template of the matched route, or the raw path when nothing matched."""
    route = request.scope.get("route")
    return getattr(route, "path_format", None) or request.url.path


def upload_size(request: Request) -> Optional[int]:
    """Declared multipart body size in bytes, for photo uploads only."""
    if not request.headers.get("content-type", "").startswith("multipart/form-data"):
        return None
    length = request.headers.get("content-length")
    return int(length) if length and length.isdigit() else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        # The router records the matched route in the shared scope during call_next
        route = route_template(request)
        size = upload_size(request)
        rid = request_id_var.get()

        message = "[%s] %s %s -> %d in %.1fms"
        args = [rid, request.method, route, response.status_code, elapsed_ms]
        if size is not None:
            message += " (upload %d bytes)"
            args.append(size)

        logger.log(
            level_for_status(response.status_code),
            message,
            *args,
            extra={
                "request_id": rid,
                "route": route,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
                "upload_bytes": size,
            },
        )
        return response
