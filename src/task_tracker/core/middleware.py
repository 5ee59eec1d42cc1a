"""Request middleware for the task tracker."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .context import REQUEST_ID_HEADER, request_id_bound

logger = logging.getLogger("task_tracker.requests")


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tag every request with an id, log its outcome and echo the id back.

    The id is taken from the incoming ``X-Request-ID`` header when present.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()
        with request_id_bound(request_id):
            response = await call_next(request)
            logger.info(
                "%s %s -> %s (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
            )
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response


__all__ = ["CorrelationIdMiddleware"]
