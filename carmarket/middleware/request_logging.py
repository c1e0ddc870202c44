"""
Request tracking middleware.
Assigns every request an ID, times it and logs slow requests.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import logging
import time
import uuid

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Adds X-Request-ID and X-Processing-Time headers to every response.

    Args:
        app: ASGI application
        enable_request_logging: Log every request, not only slow ones
        slow_request_threshold: Seconds after which a request is logged as slow
    """

    def __init__(
        self,
        app: ASGIApp,
        enable_request_logging: bool = False,
        slow_request_threshold: float = 1.0
    ):
        super().__init__(app)
        self.enable_request_logging = enable_request_logging
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            processing_time = time.time() - start_time
            logger.error(
                f"Request error [{request_id}]: {type(exc).__name__} - {str(exc)} "
                f"(processing_time: {processing_time:.3f}s)",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                    "processing_time": processing_time,
                },
                exc_info=True
            )
            raise

        processing_time = time.time() - start_time
        endpoint = f"{request.method} {request.url.path}"
        extra = {
            "request_id": request_id,
            "status_code": response.status_code,
            "processing_time": processing_time,
        }
        if processing_time > self.slow_request_threshold:
            logger.warning(f"SLOW REQUEST [{request_id}]: {endpoint} - {processing_time:.3f}s", extra=extra)
        elif self.enable_request_logging:
            logger.info(f"Request [{request_id}]: {endpoint} {response.status_code} - {processing_time:.3f}s", extra=extra)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time:.3f}"
        return response
