"""
Request timing middleware for API paths.

One INFO line per /api/ request on the "brandvoice.timing" logger:

    GET /api/brands/acme/rules | status=200 | ms=4.2 | bytes=812 | brand=acme | user=<uuid>

brand is the route's brand slug and user the authenticated user, when
present. With BRANDVOICE_LOG_DB_TIMING=1 every query the request runs is
counted and timed through a connection execute wrapper (this works with
DEBUG off), and the count is also returned as X-DB-Queries.
"""

import logging
import os
import time
from typing import Callable

from django.db import connection
from django.http import HttpRequest, HttpResponse

from brandvoice.middleware.auth import get_current_user

logger = logging.getLogger("brandvoice.timing")


class QueryTimer:
    """Execute wrapper that counts queries and sums their wall time."""

    def __init__(self):
        self.count = 0
        self.total_ms = 0.0

    def __call__(self, execute, sql, params, many, context):
        start = time.perf_counter()
        try:
            return execute(sql, params, many, context)
        finally:
            self.count += 1
            self.total_ms += (time.perf_counter() - start) * 1000


class RequestTimingMiddleware:
    """Log request timing for /api/ paths."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response
        self.log_db_timing = os.environ.get("BRANDVOICE_LOG_DB_TIMING", "0") == "1"

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        timer = QueryTimer() if self.log_db_timing else None
        start_time = time.perf_counter()

        if timer is not None:
            with connection.execute_wrapper(timer):
                response = self.get_response(request)
        else:
            response = self.get_response(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        response_bytes = len(getattr(response, "content", b""))

        fields = [
            ("status", response.status_code),
            ("ms", f"{duration_ms:.1f}"),
            ("bytes", response_bytes),
        ]
        fields.extend(_request_context(request))
        if timer is not None:
            fields.append(("queries", timer.count))
            fields.append(("db_ms", f"{timer.total_ms:.1f}"))
            response["X-DB-Queries"] = str(timer.count)

        logger.info(
            "%s %s | %s",
            request.method,
            request.path,
            " | ".join(f"{name}={value}" for name, value in fields),
        )

        response["X-Response-Bytes"] = str(response_bytes)
        response["X-Request-Time-Ms"] = f"{duration_ms:.1f}"
        return response


def _request_context(request: HttpRequest) -> list[tuple[str, object]]:
    """brand / user fields, only for requests that have them."""
    context = []

    match = getattr(request, "resolver_match", None)
    brand_slug = match.kwargs.get("brand_slug") if match is not None else None
    if brand_slug:
        context.append(("brand", brand_slug))

    user = get_current_user(request)
    if user is not None:
        context.append(("user", user.id))

    return context
