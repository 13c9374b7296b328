"""HTTP middleware for request logging."""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging and timing."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        """Log request details and timing."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        start_time = time.perf_counter()
        logger.info(f"Request started: {request.method} {request.url.path} [{request_id}]")

        try:
            response = await call_next(request)
        except Exception as e:
            processing_time = int((time.perf_counter() - start_time) * 1000)
            logger.error(f"Request failed [{request_id}] after {processing_time}ms: {e}")
            raise

        processing_time = int((time.perf_counter() - start_time) * 1000)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time-Ms"] = str(processing_time)

        logger.info(
            f"Request completed [{request_id}]: status={response.status_code}, "
            f"processing_time_ms={processing_time}"
        )

        return response
