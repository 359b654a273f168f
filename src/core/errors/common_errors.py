"""The two DomainError kinds community handlers return."""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Rejected input; `field` is the request field at fault (id, pageSize)."""

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """No community with `resource_id`."""

    resource_type: str
    resource_id: str
