"""Per-request trace IDs for the communities API.

Every response carries an X-Trace-Id header. A client-supplied value is
echoed back; otherwise a fresh UUID4 is minted. Problem Details bodies and
handler log lines read the same ID through get_trace_id().
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"

_current_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Trace ID of the request being served, None between requests."""
    return _current_trace_id.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Tags each request with a trace ID.

    The ID is also stored on request.state so the global exception handler,
    which runs after this middleware has unwound, can still report it.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id

        token = _current_trace_id.set(trace_id)
        try:
            response = await call_next(request)
        finally:
            _current_trace_id.reset(token)

        response.headers[TRACE_HEADER] = trace_id
        return response
