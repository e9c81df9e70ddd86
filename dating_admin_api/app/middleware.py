"""
Request recorder middleware.

Every request that carries a known API key in the configured header
(``X-API-Key`` by default) is appended to the store's API call log
with its method, path, caller IP and duration.  Requests without a
key, or with a key the store does not know, pass through unrecorded.
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .services.api_key_service import ApiLogService


logger = logging.getLogger(__name__)


class ApiCallRecorderMiddleware(BaseHTTPMiddleware):
    """Write an ApiLog entry for each keyed request once it has been answered."""

    def __init__(self, app, header_name: str = "X-API-Key"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        key = request.headers.get(self.header_name)
        if not key:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        ip = request.client.host if request.client else None
        ApiLogService.record_call(
            request.app.state.store,
            key=key,
            method=request.method,
            path=request.url.path,
            ip=ip,
            duration_ms=duration_ms,
        )
        return response
