"""Turns handler Failures into Problem Details responses.

Status mapping for the community routes:
    id mismatch, page size < 1   -> 400
    unknown community            -> 404
    listing store failure        -> 500 (store message kept in detail)
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    problem_response,
)

# code -> (HTTP status, title)
_PROBLEMS: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.QUERY_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Query Failed",
    ),
}


class ErrorResponseBuilder:
    """Builds the error response for a failed community command or query.

    Example:
        >>> result = await handler.handle(GetCommunity(community_id=999))
        >>> if isinstance(result, Failure):
        ...     return ErrorResponseBuilder.from_application_error(result.error, request)
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError, request: Request
    ) -> JSONResponse:
        status_code, title = _PROBLEMS[error.code]

        # Only ValidationError carries a field
        field = getattr(error.domain_error, "field", None)
        errors = None
        if error.domain_error is not None and field is not None:
            errors = [
                ErrorDetail(
                    field=field,
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return problem_response(
            request,
            status_code=status_code,
            title=title,
            slug=error.code.value,
            detail=error.message,
            errors=errors,
        )
