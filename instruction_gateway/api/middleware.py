"""Request context middleware: request IDs and latency metrics"""

import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from instruction_gateway.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_HEADER = "X-Request-ID"


def _endpoint_label(request: Request) -> str:
    # Route template once matched, so path parameters do not explode label cardinality
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID and time it.

    A caller-supplied X-Request-ID is reused so instructions can be traced
    across services; otherwise a fresh uuid4 is issued. The ID is echoed on
    the response and exposed to handlers via `request.state.request_id`.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=_endpoint_label(request),
            status=response.status_code,
        ).observe(time.perf_counter() - started)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
