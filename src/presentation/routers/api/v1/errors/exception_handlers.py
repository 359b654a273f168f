"""Problem Details for failures that never reach a community handler.

- Router misses: unknown path (404), wrong verb (405)
- Request validation: bad query/path/body values (422)
- Anything raised out of a handler, e.g. an unresolved replace conflict (500)
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    problem_response,
    request_trace_id,
)

# status -> (title, slug); anything else falls back to a generic entry
_ROUTER_PROBLEMS: dict[int, tuple[str, str]] = {
    status.HTTP_404_NOT_FOUND: ("Resource Not Found", "not-found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("Method Not Allowed", "method-not-allowed"),
}


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    title, slug = _ROUTER_PROBLEMS.get(exc.status_code, ("Error", "error"))

    return problem_response(
        request,
        status_code=exc.status_code,
        title=title,
        slug=slug,
        detail=str(exc.detail),
        headers=exc.headers,
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Report every rejected parameter as a field error.

    Field names drop the "body" prefix, so a too-long name on create is
    reported as "name" and a bad page number as "query.pageNumber".
    """
    assert isinstance(exc, RequestValidationError)

    errors = []
    for error in exc.errors():
        parts = [str(p) for p in error.get("loc", ()) if p != "body"]
        errors.append(
            ErrorDetail(
                field=".".join(parts) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return problem_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        title="Validation Failed",
        slug="validation-failed",
        detail="Request validation failed. Check 'errors' for details.",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the exception and answer with a 500 that hides its message."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=request_trace_id(request),
        request_path=request.url.path,
        request_method=request.method,
    )

    return problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        slug="internal-server-error",
        detail="An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
