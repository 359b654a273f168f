"""ApplicationError: what a community handler puts in a Failure.

`code` decides the HTTP status (see ErrorResponseBuilder); `domain_error`,
when present, supplies the field or resource named in the response.
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Failure of a community command or query.

    Example:
        >>> ApplicationError(
        ...     code=ApplicationErrorCode.QUERY_FAILED,
        ...     message="Internal server error: connection refused",
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
