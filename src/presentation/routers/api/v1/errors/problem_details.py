"""RFC 7807 Problem Details bodies for community endpoint failures.

Every non-2xx response from the API, whether produced by a handler Failure
or by FastAPI itself, goes through problem_response() so the body shape
and trace ID lookup stay identical.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.core.config import settings
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id


class ErrorDetail(BaseModel):
    """One rejected input, e.g. the body `id` of a replace."""

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """Error body returned by every community endpoint."""

    type: str = Field(
        ...,
        description="URI identifying the problem type",
        examples=["https://communities.local/errors/not_found"],
    )
    title: str = Field(..., examples=["Resource Not Found"])
    status: int = Field(..., examples=[404])
    detail: str = Field(..., examples=["Community not found"])
    instance: str = Field(
        ...,
        description="Request path that failed",
        examples=["/api/v1/communities/999"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="Per-field errors, present only for validation failures",
    )
    trace_id: str | None = Field(None, description="Value of the X-Trace-Id header")


def request_trace_id(request: Request) -> str | None:
    """Trace ID for a request, also after TraceMiddleware has unwound."""
    return getattr(request.state, "trace_id", None) or get_trace_id()


def problem_response(
    request: Request,
    *,
    status_code: int,
    title: str,
    slug: str,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render a ProblemDetails body for the failing request.

    Args:
        request: Failing request; supplies the instance path and trace ID.
        status_code: HTTP status.
        title: Short summary of the problem type.
        slug: Last segment of the problem type URI.
        detail: Message for this occurrence.
        errors: Optional per-field errors.
        headers: Extra response headers (e.g. Allow on a 405).
    """
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=request_trace_id(request),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )
