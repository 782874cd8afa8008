# shiftpay/core/request_logging.py
"""
Request logging middleware for the payroll API.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shiftpay.core.logging_config import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every HTTP request with method, path, status and duration.

    Reuses an incoming X-Request-ID header or generates one, and echoes it
    back on the response for tracing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "%s %s - 500 (%.2fms) - unhandled error",
                request.method,
                request.url.path,
                duration_ms,
                extra=self._extra(request, request_id, 500, duration_ms),
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        extra = self._extra(request, request_id, status_code, duration_ms)
        message = "%s %s - %d (%.2fms)"
        args = (request.method, request.url.path, status_code, duration_ms)

        if status_code >= 500:
            logger.error(message, *args, extra=extra)
        elif status_code >= 400:
            logger.warning(message, *args, extra=extra)
        elif request.url.path == "/health":
            # Health checks only at DEBUG (reduces noise)
            logger.debug(message, *args, extra=extra)
        else:
            logger.info(message, *args, extra=extra)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _extra(request: Request, request_id: str, status_code: int, duration_ms: float) -> dict:
        return {
            "extra_fields": {
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round(duration_ms, 2),
            }
        }
