"""Request logging middleware.

Logs every query request with method, path, status code, latency, the tick
the state was read at, and a short request ID for correlation. The request_id
is also injected into request.state so router handlers can include it in
ApiResponse.

Log format:
    INFO [GET] /data/markets/1 → 200 (2ms) tick=42 req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("pm.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        dispatcher = getattr(request.app.state, "dispatcher", None)
        logger.info(
            "[%s] %s → %d (%.0fms) tick=%s %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            dispatcher.now if dispatcher is not None else "-",
            request.state.request_id,
        )
        return response
