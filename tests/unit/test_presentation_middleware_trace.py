"""Unit tests for TraceMiddleware.

The middleware is driven directly with mocked requests so the header,
request.state and context variable can be checked without a running app.
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest

from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
    get_trace_id,
)


def _request(trace_id: str | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = {TRACE_HEADER: trace_id} if trace_id else {}
    return request


def _ok() -> AsyncMock:
    response = MagicMock()
    response.headers = {}
    return AsyncMock(return_value=response)


@pytest.fixture
def middleware() -> TraceMiddleware:
    return TraceMiddleware(app=MagicMock())


@pytest.mark.unit
class TestTraceMiddleware:
    async def test_mints_uuid_for_listing_request_without_header(self, middleware):
        call_next = _ok()

        response = await middleware.dispatch(_request(), call_next)

        assert UUID(response.headers[TRACE_HEADER]).version == 4
        call_next.assert_awaited_once()

    async def test_echoes_client_trace_id(self, middleware):
        request = _request("community-list-7")

        response = await middleware.dispatch(request, _ok())

        assert response.headers[TRACE_HEADER] == "community-list-7"
        assert request.state.trace_id == "community-list-7"

    async def test_route_handler_sees_same_id_as_response(self, middleware):
        seen: list[str | None] = []

        async def handler(request):
            seen.append(get_trace_id())
            response = MagicMock()
            response.headers = {}
            return response

        response = await middleware.dispatch(_request(), handler)

        assert seen == [response.headers[TRACE_HEADER]]

    async def test_context_is_restored_after_response(self, middleware):
        await middleware.dispatch(_request("t-1"), _ok())

        assert get_trace_id() is None

    async def test_handler_error_propagates_and_restores_context(self, middleware):
        request = _request("t-2")
        call_next = AsyncMock(side_effect=RuntimeError("listing failed"))

        with pytest.raises(RuntimeError, match="listing failed"):
            await middleware.dispatch(request, call_next)

        assert get_trace_id() is None
        assert request.state.trace_id == "t-2"

    async def test_distinct_requests_get_distinct_ids(self, middleware):
        ids = {
            (await middleware.dispatch(_request(), _ok())).headers[TRACE_HEADER]
            for _ in range(3)
        }

        assert len(ids) == 3
